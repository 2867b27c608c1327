from typing import Optional
from uuid import UUID

from taskdesk.app.services.authorization import (
    FORBIDDEN,
    require_authenticated,
    require_owner_or_admin,
)
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.errors import ErrorCode
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Error, Result, Return
from .dtos import MessageInfo


class MarkMessageReadUseCase:
    """
    Recipient (or admin) marks a message as read.

    Same existence policy as tasks: non-admins get FORBIDDEN for unknown ids.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity], message_id: UUID) -> Result[MessageInfo]:
        error = require_authenticated(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            message = await self.uow.messages.get_by_id(message_id)
            if message is None:
                if identity.is_admin:
                    return Return.err(Error(ErrorCode.NOT_FOUND, "Message not found"))
                return Return.err(FORBIDDEN)

            error = require_owner_or_admin(identity, message.owner_id)
            if error:
                return Return.err(error)

            if not message.is_read:
                message.is_read = True
                message = await self.uow.messages.update(message)
                await self.uow.commit()

            return Return.ok(MessageInfo.from_message(message))
