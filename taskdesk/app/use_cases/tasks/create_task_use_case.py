import logging
from typing import Optional

from taskdesk.app.services.authorization import require_admin
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.entities import Task, TaskStatus
from taskdesk.domain.errors import ErrorCode
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Error, Result, Return
from .dtos import CreateTaskCommand, TaskInfo

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """
    Business Rules:
    - Admin only
    - Assignee must exist
    - New tasks start pending and not completed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity], command: CreateTaskCommand) -> Result[TaskInfo]:
        error = require_admin(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            assignee = await self.uow.users.get_by_id(command.assigned_to_user_id)
            if assignee is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Assignee not found"))

            task = Task(
                title=command.title,
                description=command.description,
                assigned_to_user_id=assignee.id,
                created_by_user_id=identity.id,
                status=TaskStatus.pending,
                is_completed=False,
            )
            task = await self.uow.tasks.create(task)

            await self.uow.commit()

            logger.info(f"Task {task.id} assigned to user {assignee.id}")
            return Return.ok(TaskInfo.from_task(task))
