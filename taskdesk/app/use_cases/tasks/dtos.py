"""
Task Use Case DTOs
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from taskdesk.domain.entities import Task, TaskStatus


class CreateTaskCommand(BaseModel):
    title: str
    description: Optional[str] = None
    assigned_to_user_id: UUID


class UpdateTaskCommand(BaseModel):
    """Fields left as None are not touched"""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None


class TaskInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: Optional[str] = None
    assigned_to_user_id: UUID
    created_by_user_id: UUID
    status: TaskStatus
    is_completed: bool
    completed_at: Optional[datetime] = None
    verified_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> "TaskInfo":
        return cls.model_validate(task)
