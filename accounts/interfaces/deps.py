"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from accounts.domain.models.user import User
from accounts.domain.repositories.user_repository import UserRepository
from accounts.infrastructure.database import get_db
from accounts.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)
