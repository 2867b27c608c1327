from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from taskdesk.api.error import raise_for_error
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.app.use_cases.messages import (
    ListMessagesUseCase,
    MarkMessageReadUseCase,
    MessageInfo,
    SendMessageCommand,
    SendMessageUseCase,
)
from taskdesk.depends import get_identity, get_unit_of_work
from taskdesk.domain.identity import Identity

router = APIRouter(prefix="/messages", tags=["Messages"])


class SendMessageRequest(BaseModel):
    to_user_id: UUID
    content: str = Field(..., min_length=1)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[MessageInfo])
async def list_messages(
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Messages addressed to the caller, newest first."""
    result = await ListMessagesUseCase(uow).execute(identity)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MessageInfo)
async def send_message(
    body: SendMessageRequest,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Send a message to a user (admin only)."""
    command = SendMessageCommand(to_user_id=body.to_user_id, content=body.content)
    result = await SendMessageUseCase(uow).execute(identity, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{message_id}/read", status_code=status.HTTP_200_OK, response_model=MessageInfo)
async def mark_message_read(
    message_id: UUID,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Mark a message as read (recipient or admin)."""
    result = await MarkMessageReadUseCase(uow).execute(identity, message_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
