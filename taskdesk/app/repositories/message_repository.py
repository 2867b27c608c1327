from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from taskdesk.domain.entities import Message


class IMessageRepository(ABC):
    """Message repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, message_id: UUID) -> Optional[Message]:
        """Get message by ID"""
        pass

    @abstractmethod
    async def get_by_recipient(self, user_id: UUID) -> List[Message]:
        """Get messages sent to a user, newest first"""
        pass

    @abstractmethod
    async def create(self, message: Message) -> Message:
        """Create a new message"""
        pass

    @abstractmethod
    async def update(self, message: Message) -> Message:
        """Update existing message"""
        pass
