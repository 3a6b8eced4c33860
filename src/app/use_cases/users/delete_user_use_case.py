"""
Delete User Use Case

Soft-deletes a user.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.role_hierarchy import check_role_hierarchy
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthenticatedIdentity
from src.domain.entities import UserAction

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for deleting a user.

    Business Rules:
    - Target's current role is read from storage
    - Admin cannot delete a super_admin
    - Row is kept with deleted_at set so sessions stay auditable
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester: AuthenticatedIdentity, target_user_id: UUID
    ) -> Result[dict]:
        async with self.uow:
            target = await self.uow.users.get_by_id(target_user_id)
            if target is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            allowed = check_role_hierarchy(
                requester.role, UserAction.delete, target_role=target.role
            )
            if allowed.is_err():
                logger.warning(
                    f"User {requester.user_id} denied delete of {target_user_id}: "
                    f"{allowed.error.message}"
                )
                return allowed

            try:
                await self.uow.users.soft_delete(target)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception(f"Failed to delete user {target_user_id}")
                return Return.err(Error("PERSISTENCE_ERROR", "Failed to delete user"))

            logger.info(f"User {target_user_id} deleted by {requester.user_id}")
            return Return.ok({"user_id": str(target_user_id)})
