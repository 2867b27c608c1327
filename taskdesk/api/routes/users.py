from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from taskdesk.api.error import raise_for_error
from taskdesk.api.routes.auth import AuthResponse
from taskdesk.api.utils.cookies import set_session_cookie
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.app.use_cases.auth import UserInfo
from taskdesk.app.use_cases.users import (
    BlockStatusResponse,
    BlockUserUseCase,
    ImpersonateUserUseCase,
    ListUsersUseCase,
)
from taskdesk.depends import get_identity, get_unit_of_work
from taskdesk.domain.identity import Identity

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[UserInfo])
async def list_users(
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List all users (admin only).

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: FORBIDDEN
    """
    result = await ListUsersUseCase(uow).execute(identity)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{user_id}/block", status_code=status.HTTP_200_OK, response_model=BlockStatusResponse)
async def block_user(
    user_id: UUID,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Block a user and drop their sessions (admin only).

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: NOT_FOUND
        - 422 Unprocessable Entity: INVALID_TARGET (target is an admin)
    """
    result = await BlockUserUseCase(uow).block(identity, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{user_id}/unblock", status_code=status.HTTP_200_OK, response_model=BlockStatusResponse)
async def unblock_user(
    user_id: UUID,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Unblock a user (admin only). Same errors as block."""
    result = await BlockUserUseCase(uow).unblock(identity, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{user_id}/impersonate", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def impersonate_user(
    user_id: UUID,
    request: Request,
    response: Response,
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Sign in as another user (admin only).

    The response replaces the admin's session cookie with one for the target.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: NOT_FOUND
        - 422 Unprocessable Entity: INVALID_TARGET (admin or blocked target)
    """
    result = await ImpersonateUserUseCase(uow).execute(identity, user_id)
    if result.is_err():
        raise_for_error(result.error)

    set_session_cookie(response, request, result.value.token)
    return AuthResponse(user=result.value.user)
