"""
Task Entity

Work item an admin assigns to a user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel, Text

from taskdesk.domain.base import utc_now
from .enums import TaskStatus


class Task(SQLModel, table=True):
    """
    Task entity - owned by the user it is assigned to.

    Business Rules:
    - Only admins create and edit tasks
    - The assignee marks the task completed; an admin then verifies it
    """

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    assigned_to_user_id: UUID = Field(foreign_key="users.id", index=True)
    created_by_user_id: UUID = Field(foreign_key="users.id")

    status: TaskStatus = Field(default=TaskStatus.pending)
    is_completed: bool = Field(default=False)
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    verified_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, onupdate=utc_now)
    )

    @property
    def owner_id(self) -> UUID:
        return self.assigned_to_user_id
