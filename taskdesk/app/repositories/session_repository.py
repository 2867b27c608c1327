from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from taskdesk.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, user_id: UUID, token: str, expires_at: datetime) -> Session:
        """Persist a new session for the plain token"""
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[Session]:
        """Exact-match lookup by plain token"""
        pass

    @abstractmethod
    async def delete_by_token(self, token: str) -> bool:
        """Delete a session. Idempotent; returns True if a row was removed."""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete all sessions of a user. Returns count of deleted sessions."""
        pass
