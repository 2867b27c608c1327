"""
Message Entity

Admin-to-user message.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel, Text

from taskdesk.domain.base import utc_now


class Message(SQLModel, table=True):
    """Message entity - scoped to its recipient (to_user_id)"""

    __tablename__ = "messages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    from_user_id: UUID = Field(foreign_key="users.id")
    to_user_id: UUID = Field(foreign_key="users.id", index=True)

    content: str = Field(sa_column=Column(Text, nullable=False))
    is_read: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    @property
    def owner_id(self) -> UUID:
        return self.to_user_id
