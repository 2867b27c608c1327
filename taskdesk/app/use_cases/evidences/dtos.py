from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from taskdesk.domain.entities import TaskEvidence


class UploadEvidenceCommand(BaseModel):
    file_name: str
    file_type: str
    data: bytes


class EvidenceInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    task_id: UUID
    user_id: UUID
    file_url: str
    file_key: str
    file_name: str
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    created_at: datetime

    @classmethod
    def from_evidence(cls, evidence: TaskEvidence) -> "EvidenceInfo":
        return cls.model_validate(evidence)
