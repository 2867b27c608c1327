from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from taskdesk.domain.entities import Message


class SendMessageCommand(BaseModel):
    to_user_id: UUID
    content: str


class MessageInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    from_user_id: UUID
    to_user_id: UUID
    content: str
    is_read: bool
    created_at: datetime

    @classmethod
    def from_message(cls, message: Message) -> "MessageInfo":
        return cls.model_validate(message)
