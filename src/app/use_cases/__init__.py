"""
Use Cases

Organized into domain folders:
- auth/: Login, logout and request authentication
- users/: User management
"""

from .auth import (
    AuthenticateUseCase,
    LoginUseCase,
    LogoutUseCase,
)
from .users import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)

__all__ = [
    # Auth
    "AuthenticateUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    # Users
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
]
