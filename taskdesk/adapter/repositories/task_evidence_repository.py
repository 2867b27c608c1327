from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from taskdesk.app.repositories.task_evidence_repository import ITaskEvidenceRepository
from taskdesk.domain.entities import TaskEvidence
from .storage_guard import storage_guard


class TaskEvidenceRepository(ITaskEvidenceRepository):
    """TaskEvidence repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_guard
    async def get_by_task_id(self, task_id: UUID) -> List[TaskEvidence]:
        stmt = (
            select(TaskEvidence)
            .where(TaskEvidence.task_id == task_id)
            .order_by(TaskEvidence.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    @storage_guard
    async def create(self, evidence: TaskEvidence) -> TaskEvidence:
        self.session.add(evidence)
        await self.session.flush()
        await self.session.refresh(evidence)
        return evidence
