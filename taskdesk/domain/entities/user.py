"""
User Entity

Represents a person who can sign in to Taskdesk.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from taskdesk.domain.base import utc_now
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - a local username/password account.

    Business Rules:
    - Username must be unique across all users
    - Password stored as bcrypt hash
    - Role is fixed at creation; self-registration always yields role=user
    - Blocked users cannot sign in and their sessions stop resolving
    - Never hard-deleted
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=64)
    password_hash: str = Field(max_length=255)

    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=320)

    role: UserRole = Field(default=UserRole.user)
    is_blocked: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime, onupdate=utc_now)
    )
    last_signed_in: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
