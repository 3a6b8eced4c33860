"""
User Management Use Cases

All user-related business logic.
"""

from .create_user_use_case import CreateUserUseCase
from .list_users_use_case import ListUsersUseCase
from .get_user_use_case import GetUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import (
    CreateUserCommand,
    UpdateUserCommand,
    UserResponse,
    UserListResponse,
    Pagination,
)

__all__ = [
    # Use Cases
    "CreateUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    # DTOs - Commands
    "CreateUserCommand",
    "UpdateUserCommand",
    # DTOs - Responses
    "UserResponse",
    "UserListResponse",
    "Pagination",
]
