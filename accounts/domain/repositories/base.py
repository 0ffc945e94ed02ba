"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from contextlib import AbstractContextManager
from typing import Any, Optional, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic persistence operations."""

    def get_by_id(self, id: Any) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def save(self, obj: T) -> T:
        """Insert or update an entity; generated keys are populated on return."""
        ...

    def delete(self, obj: T) -> None:
        """Remove an entity."""
        ...

    def atomic(self) -> AbstractContextManager[None]:
        """Transaction boundary: commit on clean exit, roll back on error."""
        ...
