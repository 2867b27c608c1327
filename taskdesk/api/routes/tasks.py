from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import Base64Bytes, BaseModel, Field

from taskdesk.api.error import raise_for_error
from taskdesk.app.services.blob_storage import IBlobStorage
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.app.use_cases.evidences import (
    EvidenceInfo,
    ListEvidencesUseCase,
    UploadEvidenceCommand,
    UploadEvidenceUseCase,
)
from taskdesk.app.use_cases.tasks import (
    CreateTaskCommand,
    CreateTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    MarkTaskCompletedUseCase,
    TaskInfo,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from taskdesk.depends import get_blob_storage, get_identity, get_unit_of_work
from taskdesk.domain.entities import TaskStatus
from taskdesk.domain.identity import Identity

router = APIRouter(prefix="/tasks", tags=["Tasks"])


class CreateTaskRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    assigned_to_user_id: UUID


class UpdateTaskRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None


class UploadEvidenceRequest(BaseModel):
    file_name: str = Field(..., min_length=1, max_length=255)
    file_type: str = Field(..., min_length=1, max_length=100)
    file_data: Base64Bytes = Field(..., description="File content, base64-encoded")


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TaskInfo])
async def list_tasks(
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """All tasks for admins; own tasks for everyone else."""
    result = await ListTasksUseCase(uow).execute(identity)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskInfo)
async def create_task(
    body: CreateTaskRequest,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create and assign a task (admin only).

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: NOT_FOUND (assignee)
    """
    command = CreateTaskCommand(
        title=body.title,
        description=body.description,
        assigned_to_user_id=body.assigned_to_user_id,
    )
    result = await CreateTaskUseCase(uow).execute(identity, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskInfo)
async def get_task(
    task_id: UUID,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Read a task (assignee or admin)."""
    result = await GetTaskUseCase(uow).execute(identity, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskInfo)
async def update_task(
    task_id: UUID,
    body: UpdateTaskRequest,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Edit title, description or status (admin only)."""
    command = UpdateTaskCommand(title=body.title, description=body.description, status=body.status)
    result = await UpdateTaskUseCase(uow).execute(identity, task_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{task_id}/complete", status_code=status.HTTP_200_OK, response_model=TaskInfo)
async def mark_task_completed(
    task_id: UUID,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Report a task as done (assignee or admin)."""
    result = await MarkTaskCompletedUseCase(uow).execute(identity, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{task_id}/evidences", status_code=status.HTTP_200_OK, response_model=List[EvidenceInfo])
async def list_evidences(
    task_id: UUID,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Evidence files of a task (assignee or admin)."""
    result = await ListEvidencesUseCase(uow).execute(identity, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{task_id}/evidences", status_code=status.HTTP_201_CREATED, response_model=EvidenceInfo)
async def upload_evidence(
    task_id: UUID,
    body: UploadEvidenceRequest,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IBlobStorage = Depends(get_blob_storage),
):
    """
    Upload a completion proof (assignee or admin).

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: FORBIDDEN
        - 413 Request Entity Too Large: FILE_TOO_LARGE
        - 503 Service Unavailable: STORAGE_UNAVAILABLE
    """
    command = UploadEvidenceCommand(
        file_name=body.file_name, file_type=body.file_type, data=body.file_data
    )
    result = await UploadEvidenceUseCase(uow, storage).execute(identity, task_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
