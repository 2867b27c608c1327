from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskdesk.app.repositories.session_repository import ISessionRepository
from taskdesk.app.services.session_tokens import hash_session_token
from taskdesk.domain.entities import Session
from .storage_guard import storage_guard


class SessionRepository(ISessionRepository):
    """
    Session repository implementation using SQLModel

    Plain tokens never reach the database: every method hashes the token
    and works on token_hash, which carries a unique index.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_guard
    async def create(self, user_id: UUID, token: str, expires_at: datetime) -> Session:
        """Create a new session"""
        session_obj = Session(
            user_id=user_id,
            token_hash=hash_session_token(token),
            expires_at=expires_at,
        )
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    @storage_guard
    async def find_by_token(self, token: str) -> Optional[Session]:
        """Find session by exact token match"""
        stmt = select(Session).where(Session.token_hash == hash_session_token(token))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_guard
    async def delete_by_token(self, token: str) -> bool:
        """Delete a session; deleting an unknown token is not an error"""
        stmt = delete(Session).where(Session.token_hash == hash_session_token(token))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    @storage_guard
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete all sessions for a user"""
        stmt = delete(Session).where(Session.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
