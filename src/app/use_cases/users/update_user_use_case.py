"""
Update User Use Case

Changes a user's name and role.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.role_hierarchy import check_role_hierarchy
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthenticatedIdentity
from src.domain.entities import UserAction
from .dtos import UpdateUserCommand, UserResponse
from .roles import VALID_ROLES, parse_role

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Use case for updating a user.

    Business Rules:
    - Role must be super_admin, admin or staff
    - Target's current role is read from storage, never from the request
    - Admin cannot promote anyone to super_admin
    - Admin cannot modify a super_admin
    - Sessions already issued keep their role snapshot until they expire
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        requester: AuthenticatedIdentity,
        target_user_id: UUID,
        command: UpdateUserCommand,
    ) -> Result[UserResponse]:
        new_role = parse_role(command.role)
        if new_role is None:
            return Return.err(
                Error("INVALID_ROLE", f"Invalid role: {command.role}. Must be one of: {VALID_ROLES}")
            )

        async with self.uow:
            target = await self.uow.users.get_by_id(target_user_id)
            if target is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            allowed = check_role_hierarchy(
                requester.role,
                UserAction.update,
                target_role=target.role,
                new_role=new_role,
            )
            if allowed.is_err():
                logger.warning(
                    f"User {requester.user_id} denied update of {target_user_id}: "
                    f"{allowed.error.message}"
                )
                return allowed

            old_role = target.role.value
            target.name = command.name
            target.role = new_role

            try:
                await self.uow.users.update(target)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception(f"Failed to update user {target_user_id}")
                return Return.err(Error("PERSISTENCE_ERROR", "Failed to update user"))

            logger.info(
                f"User {target_user_id} updated by {requester.user_id} "
                f"(role {old_role} -> {new_role.value})"
            )
            return Return.ok(UserResponse.from_entity(target))
