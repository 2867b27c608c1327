"""
Task Use Cases
"""

from .create_task_use_case import CreateTaskUseCase
from .dtos import CreateTaskCommand, TaskInfo, UpdateTaskCommand
from .get_task_use_case import GetTaskUseCase
from .list_tasks_use_case import ListTasksUseCase
from .mark_task_completed_use_case import MarkTaskCompletedUseCase
from .update_task_use_case import UpdateTaskUseCase

__all__ = [
    # Use Cases
    "ListTasksUseCase",
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "GetTaskUseCase",
    "MarkTaskCompletedUseCase",
    # DTOs
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "TaskInfo",
]
