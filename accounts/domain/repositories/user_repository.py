"""
User Repository Interface.
Defines the identity store operations the user workflow relies on.
"""

from accounts.domain.repositories.base import BaseRepository
from accounts.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def exists_by_email(self, email: str) -> bool:
        """Whether any user is registered with this email."""
        ...
