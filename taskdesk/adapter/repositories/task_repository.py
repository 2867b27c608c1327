from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskdesk.app.repositories.task_repository import ITaskRepository
from taskdesk.domain.entities import Task
from .storage_guard import storage_guard


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_guard
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        stmt = select(Task).where(Task.id == task_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @storage_guard
    async def get_all(self) -> List[Task]:
        stmt = select(Task).order_by(Task.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    @storage_guard
    async def get_by_assignee(self, user_id: UUID) -> List[Task]:
        stmt = (
            select(Task)
            .where(Task.assigned_to_user_id == user_id)
            .order_by(Task.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    @storage_guard
    async def create(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    @storage_guard
    async def update(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task
