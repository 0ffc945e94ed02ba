"""
SQLAlchemy Implementation of User Repository.
"""

from sqlalchemy import exists, select

from accounts.domain.models.user import User
from accounts.domain.repositories.user_repository import UserRepository
from accounts.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def exists_by_email(self, email: str) -> bool:
        return bool(self.db.scalar(select(exists().where(User.email == email))))
