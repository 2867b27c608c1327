"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from taskdesk.domain.entities import User, UserRole


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - validated registration intent

    No role field: self-registered accounts are always plain users.
    """

    username: str
    password: str
    name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public view of a user account (never carries the password hash)"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: Optional[str] = None
    email: Optional[str] = None
    role: UserRole
    is_blocked: bool
    created_at: datetime
    last_signed_in: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls.model_validate(user)


class AuthResult(BaseModel):
    """
    Outcome of register, login and impersonate.

    The token is handed to the transport layer to bind to a cookie; it is
    not part of any response body.
    """

    user: UserInfo
    token: str
    expires_at: datetime
