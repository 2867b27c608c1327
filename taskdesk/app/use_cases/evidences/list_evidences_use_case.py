from typing import List, Optional
from uuid import UUID

from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.app.use_cases.tasks.access import load_accessible_task
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Result, Return
from .dtos import EvidenceInfo


class ListEvidencesUseCase:
    """Evidence attached to a task (assignee or admin)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity], task_id: UUID) -> Result[List[EvidenceInfo]]:
        async with self.uow:
            result = await load_accessible_task(self.uow, identity, task_id)
            if result.is_err():
                return result

            evidences = await self.uow.task_evidences.get_by_task_id(task_id)
            return Return.ok([EvidenceInfo.from_evidence(e) for e in evidences])
