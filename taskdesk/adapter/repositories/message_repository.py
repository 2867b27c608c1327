from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskdesk.app.repositories.message_repository import IMessageRepository
from taskdesk.domain.entities import Message
from .storage_guard import storage_guard


class MessageRepository(IMessageRepository):
    """Message repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_guard
    async def get_by_id(self, message_id: UUID) -> Optional[Message]:
        stmt = select(Message).where(Message.id == message_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_guard
    async def get_by_recipient(self, user_id: UUID) -> List[Message]:
        stmt = (
            select(Message)
            .where(Message.to_user_id == user_id)
            .order_by(Message.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    @storage_guard
    async def create(self, message: Message) -> Message:
        self.session.add(message)
        await self.session.flush()
        await self.session.refresh(message)
        return message

    @storage_guard
    async def update(self, message: Message) -> Message:
        self.session.add(message)
        await self.session.flush()
        await self.session.refresh(message)
        return message
