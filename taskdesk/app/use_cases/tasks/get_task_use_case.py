from typing import Optional
from uuid import UUID

from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Result, Return
from .access import load_accessible_task
from .dtos import TaskInfo


class GetTaskUseCase:
    """Read one task (assignee or admin)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity], task_id: UUID) -> Result[TaskInfo]:
        async with self.uow:
            result = await load_accessible_task(self.uow, identity, task_id)
            if result.is_err():
                return result
            return Return.ok(TaskInfo.from_task(result.value))
