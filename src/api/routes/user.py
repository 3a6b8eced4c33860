from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedIdentity
from src.app.use_cases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserListResponse,
    UserResponse,
)
from src.app.use_cases.users.list_users_use_case import MAX_LIMIT, MAX_PAGE
from src.depends import get_password_hasher, get_unit_of_work, require_roles
from src.domain.entities import UserRole

# Only admins and super_admins may manage users
user_managers = require_roles(UserRole.super_admin, UserRole.admin)

router = APIRouter(
    prefix="/users", tags=["User"], dependencies=[Depends(user_managers)]
)

ERROR_STATUS = {
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "EMAIL_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error):
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


class CreateUserRequest(BaseModel):
    """Create user HTTP request payload"""

    name: str = Field(..., min_length=3, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password (min 6 chars)")
    role: str = Field(..., description="super_admin, admin or staff")


class UpdateUserRequest(BaseModel):
    """Update user HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    role: str = Field(..., description="super_admin, admin or staff")


class DeleteUserResponse(BaseModel):
    message: str


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def create_user(
    request: CreateUserRequest,
    requester: AuthenticatedIdentity = Depends(user_managers),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Create User

    Raises:
        - 400 Bad Request: Invalid role or email already exists
        - 403 Forbidden: Admin creating a super_admin
        - 500 Internal Server Error: Server error
    """
    command = CreateUserCommand(
        name=request.name,
        email=request.email,
        password=request.password,
        role=request.role,
    )

    result = await CreateUserUseCase(uow, hasher=hasher).execute(requester, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    page: int = Query(1, le=MAX_PAGE, description="Page number (default 1)"),
    limit: int = Query(10, le=MAX_LIMIT, description="Items per page (default 10, max 100)"),
    search: str = Query("", description="Filter on name or email"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List users with pagination and optional search."""
    result = await ListUsersUseCase(uow).execute(page=page, limit=limit, search=search)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_user(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetUserUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    requester: AuthenticatedIdentity = Depends(user_managers),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User

    Changes name and role. The target's current role is checked against the
    requester's role before anything is written.

    Raises:
        - 400 Bad Request: Invalid role
        - 403 Forbidden: Admin modifying a super_admin or promoting to super_admin
        - 404 Not Found: User not found
        - 500 Internal Server Error: Server error
    """
    command = UpdateUserCommand(name=request.name, role=request.role)

    result = await UpdateUserUseCase(uow).execute(requester, user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{user_id}", status_code=status.HTTP_200_OK, response_model=DeleteUserResponse
)
async def delete_user(
    user_id: UUID,
    requester: AuthenticatedIdentity = Depends(user_managers),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete User

    Raises:
        - 403 Forbidden: Admin deleting a super_admin
        - 404 Not Found: User not found
        - 500 Internal Server Error: Server error
    """
    result = await DeleteUserUseCase(uow).execute(requester, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return {"message": "User deleted successfully"}
