"""
Upload Evidence Use Case

Stores a completion proof file and records it against the task.
"""

import logging
import re
import time
from pathlib import PurePosixPath
from typing import Optional
from uuid import UUID

from taskdesk.app.services.blob_storage import IBlobStorage
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.app.use_cases.tasks.access import load_accessible_task
from taskdesk.config import ApplicationConfig
from taskdesk.domain.entities import TaskEvidence
from taskdesk.domain.errors import ErrorCode
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Error, Result, Return
from .dtos import EvidenceInfo, UploadEvidenceCommand

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_file_name(file_name: str) -> str:
    """Reduce a client-supplied name to a single path segment of safe characters."""
    base = PurePosixPath(file_name.replace("\\", "/")).name
    cleaned = _UNSAFE_CHARS.sub("_", base).strip("._")
    return cleaned[:200] or "file"


class UploadEvidenceUseCase:
    """
    Business Rules:
    - Assignee or admin only; checked before any blob is written
    - Files above MAX_EVIDENCE_BYTES are refused (FILE_TOO_LARGE)
    - Blob key: evidences/{task_id}/{user_id}/{epoch_ms}-{file_name}
    - If the evidence row cannot be committed the blob is removed again
    """

    def __init__(self, uow: UnitOfWork, storage: IBlobStorage, max_bytes: Optional[int] = None):
        self.uow = uow
        self.storage = storage
        self.max_bytes = max_bytes or ApplicationConfig.MAX_EVIDENCE_BYTES

    async def execute(
        self, identity: Optional[Identity], task_id: UUID, command: UploadEvidenceCommand
    ) -> Result[EvidenceInfo]:
        async with self.uow:
            result = await load_accessible_task(self.uow, identity, task_id)
            if result.is_err():
                return result

            size = len(command.data)
            if size > self.max_bytes:
                return Return.err(
                    Error(ErrorCode.FILE_TOO_LARGE, f"File exceeds {self.max_bytes} bytes")
                )

            epoch_ms = int(time.time() * 1000)
            file_key = f"evidences/{task_id}/{identity.id}/{epoch_ms}-{safe_file_name(command.file_name)}"

            file_url = await self.storage.put(file_key, command.data, command.file_type)

            evidence = TaskEvidence(
                task_id=task_id,
                user_id=identity.id,
                file_url=file_url,
                file_key=file_key,
                file_name=command.file_name,
                file_type=command.file_type,
                file_size=size,
            )
            try:
                evidence = await self.uow.task_evidences.create(evidence)
                await self.uow.commit()
            except Exception:
                logger.error(f"Evidence record for {file_key} failed, removing blob")
                await self.storage.delete(file_key)
                raise

            return Return.ok(EvidenceInfo.from_evidence(evidence))
