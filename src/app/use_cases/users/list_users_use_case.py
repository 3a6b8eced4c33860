"""
List Users Use Case

Paginated, searchable listing of active users.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import UserListResponse, UserResponse

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Keeps (page - 1) * limit inside a 64-bit OFFSET
MAX_PAGE = 1_000_000


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, page: int = 0, limit: int = 0, search: str = "") -> Result[UserListResponse]:
        page = min(page, MAX_PAGE) if page >= 1 else DEFAULT_PAGE
        limit = min(limit, MAX_LIMIT) if limit >= 1 else DEFAULT_LIMIT
        offset = (page - 1) * limit

        async with self.uow:
            total_items = await self.uow.users.count(search)
            users = await self.uow.users.list(limit, offset, search)

            return Return.ok(
                UserListResponse.build(
                    [UserResponse.from_entity(u) for u in users],
                    page=page,
                    limit=limit,
                    total_items=total_items,
                )
            )
