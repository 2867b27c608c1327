from typing import List, Optional

from taskdesk.app.services.authorization import require_authenticated
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Result, Return
from .dtos import TaskInfo


class ListTasksUseCase:
    """Admins see every task; users see the tasks assigned to them"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity]) -> Result[List[TaskInfo]]:
        error = require_authenticated(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            if identity.is_admin:
                tasks = await self.uow.tasks.get_all()
            else:
                tasks = await self.uow.tasks.get_by_assignee(identity.id)
            return Return.ok([TaskInfo.from_task(t) for t in tasks])
