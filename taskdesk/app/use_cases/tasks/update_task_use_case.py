from typing import Optional
from uuid import UUID

from taskdesk.app.services.authorization import require_admin
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.base import utc_now
from taskdesk.domain.entities import TaskStatus
from taskdesk.domain.errors import ErrorCode
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Error, Result, Return
from .dtos import TaskInfo, UpdateTaskCommand


class UpdateTaskUseCase:
    """
    Business Rules:
    - Admin only
    - Only title, description and status are editable
    - Moving to verified stamps verified_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, identity: Optional[Identity], task_id: UUID, command: UpdateTaskCommand
    ) -> Result[TaskInfo]:
        error = require_admin(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Task not found"))

            if command.title is not None:
                task.title = command.title
            if command.description is not None:
                task.description = command.description
            if command.status is not None:
                task.status = command.status
                if command.status == TaskStatus.verified:
                    task.verified_at = utc_now()

            task = await self.uow.tasks.update(task)
            await self.uow.commit()

            return Return.ok(TaskInfo.from_task(task))
