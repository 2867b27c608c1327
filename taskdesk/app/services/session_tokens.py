"""Opaque session token generation and expiry rules."""

import hashlib
import secrets
from datetime import datetime, timedelta

from taskdesk.config import ApplicationConfig

TOKEN_BYTES = 32


def generate_session_token() -> str:
    """32 bytes from the OS CSPRNG, hex-encoded (64 chars)."""
    return secrets.token_hex(TOKEN_BYTES)


def hash_session_token(token: str) -> str:
    """SHA-256 hex digest stored in place of the token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def session_ttl() -> timedelta:
    return timedelta(days=ApplicationConfig.SESSION_TTL_DAYS)


def session_expiry(now: datetime) -> datetime:
    return now + session_ttl()
