"""
User Management Use Case DTOs

Commands carry validated business intent from the API layer;
responses never include password hashes.
"""

import math
from typing import List

from pydantic import BaseModel

from src.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class CreateUserCommand(BaseModel):
    name: str
    email: str
    password: str
    role: str


class UpdateUserCommand(BaseModel):
    name: str
    role: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserResponse(BaseModel):
    """Public user data"""

    id: str
    name: str
    email: str
    role: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
        )


class Pagination(BaseModel):
    page: int
    limit: int
    total_items: int
    total_pages: int


class UserListResponse(BaseModel):
    """Paginated list of users"""

    data: List[UserResponse]
    pagination: Pagination

    @classmethod
    def build(
        cls, users: List[UserResponse], page: int, limit: int, total_items: int
    ) -> "UserListResponse":
        total_pages = max(1, math.ceil(total_items / limit))
        return cls(
            data=users,
            pagination=Pagination(
                page=page,
                limit=limit,
                total_items=total_items,
                total_pages=total_pages,
            ),
        )
