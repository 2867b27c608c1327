from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from taskdesk.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_all(self) -> List[User]:
        """Get all users ordered by creation time"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises UniqueViolationError if the username is taken."""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def set_block_status(self, user_id: UUID, is_blocked: bool) -> bool:
        """Set the blocked flag. Returns True if the user existed."""
        pass
