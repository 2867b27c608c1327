"""
Stable error codes surfaced to API callers.
"""

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    ACCOUNT_BLOCKED = "ACCOUNT_BLOCKED"
    DUPLICATE_USER = "DUPLICATE_USER"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
    INVALID_TARGET = "INVALID_TARGET"
    NOT_FOUND = "NOT_FOUND"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    # Only code a caller may retry
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
