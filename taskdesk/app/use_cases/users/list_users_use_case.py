from typing import List, Optional

from taskdesk.app.services.authorization import require_admin
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.app.use_cases.auth.dtos import UserInfo
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Result, Return


class ListUsersUseCase:
    """All accounts, admin only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity]) -> Result[List[UserInfo]]:
        error = require_admin(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            users = await self.uow.users.get_all()
            return Return.ok([UserInfo.from_user(u) for u in users])
