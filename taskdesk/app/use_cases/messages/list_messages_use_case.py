from typing import List, Optional

from taskdesk.app.services.authorization import require_authenticated
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Result, Return
from .dtos import MessageInfo


class ListMessagesUseCase:
    """The caller's inbox"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity]) -> Result[List[MessageInfo]]:
        error = require_authenticated(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            messages = await self.uow.messages.get_by_recipient(identity.id)
            return Return.ok([MessageInfo.from_message(m) for m in messages])
