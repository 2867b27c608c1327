from typing import Optional
from uuid import UUID

from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.base import utc_now
from taskdesk.domain.entities import TaskStatus
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Result, Return
from .access import load_accessible_task
from .dtos import TaskInfo


class MarkTaskCompletedUseCase:
    """
    Assignee (or admin) reports a task as done.

    The task goes to in_progress with is_completed set; an admin moves it to
    verified after reviewing the evidence.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity], task_id: UUID) -> Result[TaskInfo]:
        async with self.uow:
            result = await load_accessible_task(self.uow, identity, task_id)
            if result.is_err():
                return result

            task = result.value
            task.is_completed = True
            task.status = TaskStatus.in_progress
            task.completed_at = utc_now()

            task = await self.uow.tasks.update(task)
            await self.uow.commit()

            return Return.ok(TaskInfo.from_task(task))
