from typing import Optional

from taskdesk.app.services.authorization import require_admin
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.entities import Message
from taskdesk.domain.errors import ErrorCode
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Error, Result, Return
from .dtos import MessageInfo, SendMessageCommand


class SendMessageUseCase:
    """
    Business Rules:
    - Admin only; the sender is always the calling admin
    - Recipient must exist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity], command: SendMessageCommand) -> Result[MessageInfo]:
        error = require_admin(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            recipient = await self.uow.users.get_by_id(command.to_user_id)
            if recipient is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Recipient not found"))

            message = Message(
                from_user_id=identity.id,
                to_user_id=recipient.id,
                content=command.content,
                is_read=False,
            )
            message = await self.uow.messages.create(message)
            await self.uow.commit()

            return Return.ok(MessageInfo.from_message(message))
