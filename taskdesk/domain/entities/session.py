"""
Session Entity

Server-side record behind an opaque session cookie.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from taskdesk.domain.base import utc_now


class Session(SQLModel, table=True):
    """
    Session entity - proof of a prior successful authentication.

    Business Rules:
    - The opaque token is 32 random bytes, hex-encoded (64 chars)
    - Only the SHA-256 hash of the token is stored
    - Valid while now < expires_at and the owner is not blocked
    - Expired sessions are deleted lazily, on first access after expiry
    - A user may hold any number of concurrent sessions
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 hex

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
