"""
Authenticate Use Case

Resolves an Authorization header to the identity of a live session.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuthenticatedIdentity

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


def parse_bearer(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a "Bearer <token>" header, or None if malformed."""
    parts = authorization.split(" ") if authorization else []
    if len(parts) != 2 or parts[0] != BEARER_SCHEME:
        return None
    return parts[1]


class AuthenticateUseCase:
    """
    Use case for authenticating a request.

    Steps (any failure stops the request):
    - MISSING_CREDENTIAL: no Authorization header
    - MALFORMED_CREDENTIAL: not "Bearer <token>", or token is not a session id
    - INVALID_OR_EXPIRED_SESSION: no session that is unrevoked and unexpired
    Callers must not reveal which of these happened.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, authorization: Optional[str]) -> Result[AuthenticatedIdentity]:
        if not authorization:
            return Return.err(
                Error("MISSING_CREDENTIAL", "Missing authorization header")
            )

        token = parse_bearer(authorization)
        if token is None:
            return Return.err(
                Error("MALFORMED_CREDENTIAL", "Invalid authorization format")
            )

        try:
            session_id = UUID(token)
        except ValueError:
            return Return.err(Error("MALFORMED_CREDENTIAL", "Token is not a session id"))

        async with self.uow:
            session = await self.uow.sessions.get_valid(session_id)
            if session is None:
                return Return.err(
                    Error("INVALID_OR_EXPIRED_SESSION", "Session not found, expired or revoked")
                )

            # Identity comes from the session snapshot, not the user record
            identity = AuthenticatedIdentity(
                user_id=session.user_id,
                role=session.role,
                session_id=session.id,
            )

        logger.debug(f"Request authenticated as user {identity.user_id}")
        return Return.ok(identity)
