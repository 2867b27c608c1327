"""
TaskEvidence Entity

Reference to a file uploaded as proof of task completion.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from taskdesk.domain.base import utc_now


class TaskEvidence(SQLModel, table=True):
    """
    TaskEvidence entity - metadata of an uploaded blob.

    The blob itself lives in blob storage under file_key.
    """

    __tablename__ = "task_evidences"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    task_id: UUID = Field(foreign_key="tasks.id", index=True)
    user_id: UUID = Field(foreign_key="users.id")

    file_url: str = Field(max_length=512)
    file_key: str = Field(max_length=512)
    file_name: str = Field(max_length=255)
    file_type: Optional[str] = Field(default=None, max_length=100)
    file_size: Optional[int] = None

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
