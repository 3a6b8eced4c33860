"""
Logout Use Case

Revokes the session behind a bearer token.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logging out.

    Business Rules:
    - Token must parse as a session id
    - Revocation is idempotent: an already revoked session keeps its first revoked_at
    - Unknown tokens succeed the same way as known ones
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[LogoutResponse]:
        try:
            session_id = UUID(token)
        except (TypeError, ValueError):
            return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

        async with self.uow:
            try:
                revoked = await self.uow.sessions.revoke(session_id)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception(f"Failed to revoke session {session_id}")
                return Return.err(Error("PERSISTENCE_ERROR", "Failed to log out"))

        if revoked:
            logger.info(f"Session {session_id} revoked")
        else:
            logger.info(f"Session {session_id} was already revoked or does not exist")

        return Return.ok(LogoutResponse(message="Logged out successfully"))
