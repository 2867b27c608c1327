"""
Taskdesk Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import TaskStatus, UserRole

# Export all entities
from .user import User
from .session import Session
from .task import Task
from .task_evidence import TaskEvidence
from .message import Message

__all__ = [
    # Enums
    "UserRole",
    "TaskStatus",
    # Entities
    "User",
    "Session",
    "Task",
    "TaskEvidence",
    "Message",
]
