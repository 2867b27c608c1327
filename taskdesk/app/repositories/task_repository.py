from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from taskdesk.domain.entities import Task


class ITaskRepository(ABC):
    """Task repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Task]:
        """Get all tasks"""
        pass

    @abstractmethod
    async def get_by_assignee(self, user_id: UUID) -> List[Task]:
        """Get tasks assigned to a user"""
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Create a new task"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update existing task"""
        pass
