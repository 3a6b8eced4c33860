"""
Create User Use Case

Registers a new user on behalf of an admin or super_admin.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.role_hierarchy import check_role_hierarchy
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthenticatedIdentity
from src.domain.entities import User, UserAction
from .dtos import CreateUserCommand, UserResponse
from .roles import VALID_ROLES, parse_role

logger = logging.getLogger(__name__)

EMAIL_ALREADY_EXISTS = Error("EMAIL_ALREADY_EXISTS", "Email already exists")


class CreateUserUseCase:
    """
    Use case for creating a user.

    Business Rules:
    - Role must be super_admin, admin or staff
    - Admin cannot create a super_admin
    - Email must be unique
    - Password stored as bcrypt hash
    """

    def __init__(self, uow: UnitOfWork, hasher: Optional[PasswordHasher] = None):
        self.uow = uow
        self.hasher = hasher or PasswordHasher()

    async def execute(
        self, requester: AuthenticatedIdentity, command: CreateUserCommand
    ) -> Result[UserResponse]:
        role = parse_role(command.role)
        if role is None:
            return Return.err(
                Error("INVALID_ROLE", f"Invalid role: {command.role}. Must be one of: {VALID_ROLES}")
            )

        allowed = check_role_hierarchy(requester.role, UserAction.create, new_role=role)
        if allowed.is_err():
            logger.warning(
                f"User {requester.user_id} denied: {allowed.error.message}"
            )
            return allowed

        async with self.uow:
            existing = await self.uow.users.get_by_email(command.email)
            if existing is not None:
                return Return.err(EMAIL_ALREADY_EXISTS)

            user = User(
                name=command.name,
                email=command.email,
                password_hash=self.hasher.hash(command.password),
                role=role,
            )

            try:
                await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # Lost a race with a concurrent create of the same email
                logger.warning("Duplicate email on user insert")
                return Return.err(EMAIL_ALREADY_EXISTS)
            except SQLAlchemyError:
                logger.exception("Failed to insert user")
                return Return.err(Error("PERSISTENCE_ERROR", "Failed to create user"))

            logger.info(f"User {user.id} created by {requester.user_id}")
            return Return.ok(UserResponse.from_entity(user))
