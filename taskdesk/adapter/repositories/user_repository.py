from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskdesk.app.repositories.errors import UniqueViolationError
from taskdesk.app.repositories.user_repository import IUserRepository
from taskdesk.domain.base import utc_now
from taskdesk.domain.entities import User
from .storage_guard import storage_guard


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_guard
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        stmt = select(User).where(User.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_guard
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_guard
    async def get_all(self) -> List[User]:
        """Get all users ordered by creation time"""
        stmt = select(User).order_by(User.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    @storage_guard
    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise UniqueViolationError(f"Username already exists: {user.username}") from exc
        await self.session.refresh(user)
        return user

    @storage_guard
    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    @storage_guard
    async def set_block_status(self, user_id: UUID, is_blocked: bool) -> bool:
        """Set the blocked flag in a single UPDATE"""
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(is_blocked=is_blocked, updated_at=utc_now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
