"""Password hashing and verification."""

import base64
import hashlib
from functools import lru_cache
from typing import Optional

import bcrypt

from taskdesk.config import ApplicationConfig


def _prehash(plain_password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; a base64 SHA-256 digest is 44.
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """Hash a plain-text password for storage. A fresh salt is drawn on every call."""
    salt = bcrypt.gensalt(rounds or ApplicationConfig.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_prehash(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes verify as False."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("taskdesk-dummy-password")


def burn_verification(plain_password: str) -> None:
    """Run a full verification against a throwaway hash so unknown usernames cost the same time."""
    verify_password(plain_password, _dummy_hash())
