from typing import Optional

from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.app.use_cases.auth.dtos import UserInfo
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Result, Return


class GetCurrentUserUseCase:
    """Profile of the caller, or None for anonymous callers"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity]) -> Result[Optional[UserInfo]]:
        if identity is None:
            return Return.ok(None)

        async with self.uow:
            user = await self.uow.users.get_by_id(identity.id)
            if user is None:
                return Return.ok(None)
            return Return.ok(UserInfo.from_user(user))
