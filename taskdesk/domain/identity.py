"""
Authenticated identity resolved from a session for the duration of one request.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from .entities import User, UserRole


@dataclass(frozen=True)
class Identity:
    id: UUID
    username: str
    role: UserRole
    name: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(id=user.id, username=user.username, role=UserRole(user.role), name=user.name)
