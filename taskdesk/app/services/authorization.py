"""
Authorization policy.

Gates return None when the caller may proceed, or the Error to hand back.
Use cases call them before touching any repository that writes, so a
rejected operation never has partial side effects.

    error = require_admin(identity)
    if error:
        return Return.err(error)
"""

from typing import Optional
from uuid import UUID

from taskdesk.domain.entities import User, UserRole
from taskdesk.domain.errors import ErrorCode
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Error

UNAUTHENTICATED = Error(ErrorCode.UNAUTHENTICATED, "Authentication required")
FORBIDDEN = Error(ErrorCode.FORBIDDEN, "You do not have access to this resource")
ADMIN_REQUIRED = Error(ErrorCode.FORBIDDEN, "Admin access required")


def require_authenticated(identity: Optional[Identity]) -> Optional[Error]:
    if identity is None:
        return UNAUTHENTICATED
    return None


def require_role(identity: Optional[Identity], role: UserRole) -> Optional[Error]:
    """Role gate. Unknown roles are rejected rather than treated as 'user'."""
    if identity is None:
        return UNAUTHENTICATED
    if role not in (UserRole.user, UserRole.admin):
        raise ValueError(f"Unknown role: {role!r}")
    if identity.role not in (UserRole.user, UserRole.admin):
        return FORBIDDEN
    if role == UserRole.admin and identity.role != UserRole.admin:
        return ADMIN_REQUIRED
    return None


def require_admin(identity: Optional[Identity]) -> Optional[Error]:
    return require_role(identity, UserRole.admin)


def require_owner_or_admin(identity: Optional[Identity], owner_id: UUID) -> Optional[Error]:
    """Ownership gate with admin override."""
    if identity is None:
        return UNAUTHENTICATED
    if identity.role == UserRole.admin:
        return None
    if identity.role == UserRole.user and identity.id == owner_id:
        return None
    return FORBIDDEN


def ensure_manageable_target(target: Optional[User]) -> Optional[Error]:
    """Target check for block, unblock and impersonate: must exist and must not be an admin."""
    if target is None:
        return Error(ErrorCode.NOT_FOUND, "User not found")
    if target.role == UserRole.admin:
        return Error(ErrorCode.INVALID_TARGET, "Admin accounts cannot be targeted")
    return None
