"""
Authentication Use Cases

Registration, login, logout and per-request identity resolution.
"""

from .dtos import AuthResult, RegisterCommand, UserInfo
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .register_use_case import RegisterUseCase
from .resolve_identity_use_case import ResolveIdentityUseCase

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "ResolveIdentityUseCase",
    # DTOs
    "RegisterCommand",
    "UserInfo",
    "AuthResult",
]
