"""
Taskdesk Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role. Closed set: every gate compares against these two values."""

    user = "user"
    admin = "admin"


class TaskStatus(str, Enum):
    """Task lifecycle status"""

    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    verified = "verified"
