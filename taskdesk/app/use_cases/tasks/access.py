from typing import Optional
from uuid import UUID

from taskdesk.app.services.authorization import (
    FORBIDDEN,
    require_authenticated,
    require_owner_or_admin,
)
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.entities import Task
from taskdesk.domain.errors import ErrorCode
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Error, Result, Return


async def load_accessible_task(
    uow: UnitOfWork, identity: Optional[Identity], task_id: UUID
) -> Result[Task]:
    """
    Fetch a task through the ownership gate.

    Non-admins get FORBIDDEN for missing tasks as well as for tasks assigned
    to someone else, so task ids cannot be probed. Admins get NOT_FOUND.
    """
    error = require_authenticated(identity)
    if error:
        return Return.err(error)

    task = await uow.tasks.get_by_id(task_id)
    if task is None:
        if identity.is_admin:
            return Return.err(Error(ErrorCode.NOT_FOUND, "Task not found"))
        return Return.err(FORBIDDEN)

    error = require_owner_or_admin(identity, task.owner_id)
    if error:
        return Return.err(error)

    return Return.ok(task)
