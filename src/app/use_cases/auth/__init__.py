"""
Authentication Use Cases

All authentication-related business logic.
"""

from .authenticate_use_case import AuthenticateUseCase, parse_bearer
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .dtos import AuthenticatedIdentity, LoginResponse, LogoutResponse, UserInfo

__all__ = [
    # Use Cases
    "AuthenticateUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    # DTOs
    "AuthenticatedIdentity",
    "LoginResponse",
    "LogoutResponse",
    "UserInfo",
    # Helpers
    "parse_bearer",
]
