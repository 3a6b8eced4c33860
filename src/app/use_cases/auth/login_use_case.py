"""
Login Use Case

Verifies credentials and issues an opaque session token.
"""

import logging
from datetime import timedelta
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Session
from .dtos import LoginResponse, UserInfo

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and session issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Unknown email and wrong password return the same error
    - Creates one session snapshotting the user's current role
    - Session expires a fixed TTL after issuance
    - The token is only returned once the session is durably stored
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: Optional[PasswordHasher] = None,
        session_ttl: timedelta = timedelta(hours=24),
    ):
        self.uow = uow
        self.hasher = hasher or PasswordHasher()
        self.session_ttl = session_ttl

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the access token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                # Keep timing the same as a wrong password
                self.hasher.burn()
                logger.warning("Login failed: user not found")
                return Return.err(INVALID_CREDENTIALS)

            if not self.hasher.verify(password, user.password_hash):
                logger.warning(f"Login failed: invalid password for user {user.id}")
                return Return.err(INVALID_CREDENTIALS)

            now = utcnow()
            session = Session(
                user_id=user.id,
                role=user.role,
                created_at=now,
                expired_at=now + self.session_ttl,
            )
            access_token = str(session.id)

            try:
                await self.uow.sessions.create(session)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception(f"Failed to save session for user {user.id}")
                return Return.err(
                    Error("PERSISTENCE_ERROR", "Failed to generate authentication token")
                )

            logger.info(f"User {user.id} logged in")

            return Return.ok(
                LoginResponse(
                    access_token=access_token,
                    user=UserInfo(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        role=user.role.value,
                    ),
                )
            )
