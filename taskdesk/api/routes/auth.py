from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, Field

from taskdesk.api.error import raise_for_error
from taskdesk.api.utils.cookies import clear_session_cookie, set_session_cookie
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.app.use_cases.auth import (
    LoginUseCase,
    LogoutUseCase,
    RegisterCommand,
    RegisterUseCase,
    UserInfo,
)
from taskdesk.app.use_cases.users import GetCurrentUserUseCase
from taskdesk.depends import get_identity, get_session_token, get_unit_of_work
from taskdesk.domain.identity import Identity

router = APIRouter(prefix="/auth", tags=["Authentication"])


class AuthResponse(BaseModel):
    """Body returned when a session cookie has been issued"""

    success: bool = True
    user: UserInfo


class SuccessResponse(BaseModel):
    success: bool = True


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    There is deliberately no role field: every self-registered account is a
    plain user.
    """

    username: str = Field(..., min_length=3, max_length=64, description="Unique username")
    password: str = Field(..., min_length=6, max_length=256, description="Password (min 6 chars)")
    name: Optional[str] = Field(None, max_length=255, description="Display name")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    body: RegisterRequest,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register a new user and sign them in.

    Raises:
        - 409 Conflict: DUPLICATE_USER
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = RegisterCommand(username=body.username, password=body.password, name=body.name)

    result = await RegisterUseCase(uow).execute(command)
    if result.is_err():
        raise_for_error(result.error)

    set_session_cookie(response, request, result.value.token)
    return AuthResponse(user=result.value.user)


class LoginRequest(BaseModel):
    username: str = Field(..., max_length=64)
    password: str = Field(..., max_length=256)


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Sign in with username and password; the session token is set as an http-only cookie.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS (unknown user or wrong password)
        - 403 Forbidden: ACCOUNT_BLOCKED
    """
    result = await LoginUseCase(uow).execute(body.username, body.password)
    if result.is_err():
        raise_for_error(result.error)

    set_session_cookie(response, request, result.value.token)
    return AuthResponse(user=result.value.user)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=SuccessResponse)
async def logout(
    request: Request,
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete the current session (if any) and clear the cookie. Always succeeds."""
    result = await LogoutUseCase(uow).execute(token)
    if result.is_err():
        raise_for_error(result.error)

    clear_session_cookie(response, request)
    return SuccessResponse()


@router.get("/me", status_code=status.HTTP_200_OK, response_model=Optional[UserInfo])
async def me(
    identity: Optional[Identity] = Depends(get_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current user, or null when the request carries no valid session."""
    result = await GetCurrentUserUseCase(uow).execute(identity)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
