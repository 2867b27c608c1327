"""
User Management Use Cases

All user-related business logic.
"""

from .block_user_use_case import BlockStatusResponse, BlockUserUseCase
from .get_current_user_use_case import GetCurrentUserUseCase
from .impersonate_user_use_case import ImpersonateUserUseCase
from .list_users_use_case import ListUsersUseCase

__all__ = [
    "GetCurrentUserUseCase",
    "ListUsersUseCase",
    "BlockUserUseCase",
    "ImpersonateUserUseCase",
    "BlockStatusResponse",
]
