from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from taskdesk.domain.entities import TaskEvidence


class ITaskEvidenceRepository(ABC):
    """TaskEvidence repository interface - application layer"""

    @abstractmethod
    async def get_by_task_id(self, task_id: UUID) -> List[TaskEvidence]:
        """Get all evidence for a task"""
        pass

    @abstractmethod
    async def create(self, evidence: TaskEvidence) -> TaskEvidence:
        """Create a new evidence record"""
        pass
