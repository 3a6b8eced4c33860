import logging
from typing import Optional

from fastapi import Depends, Header, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.access_control import authorize
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticateUseCase, AuthenticatedIdentity
from src.domain.entities import UserRole

logger = logging.getLogger(__name__)

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Single client-facing error for every authentication failure
INVALID_TOKEN = Error("UNAUTHORIZED", "Invalid or expired token")
BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


async def get_current_identity(
    authorization: Optional[str] = Header(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AuthenticatedIdentity:
    """
    Authentication gate: resolve the bearer token to a live session.

    Args:
        authorization: Raw Authorization header
        uow: Unit of work for the session lookup

    Returns:
        Identity (user_id, role, session_id) taken from the session

    Raises:
        ClientError: 401 for a missing, malformed, unknown, expired or revoked token
    """
    result = await AuthenticateUseCase(uow).execute(authorization)

    if result.is_err():
        # The specific cause is only logged, never returned
        logger.warning(f"Authentication failed: {result.error.code}")
        raise ClientError(
            INVALID_TOKEN,
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers=BEARER_CHALLENGE,
        )

    return result.value


def require_roles(*roles: UserRole):
    """
    Build an authorization gate admitting only the given roles.

    The gate depends on get_current_identity, so it always runs after
    authentication within the same request.
    """
    allowed = frozenset(roles)

    async def role_gate(
        identity: AuthenticatedIdentity = Depends(get_current_identity),
    ) -> AuthenticatedIdentity:
        result = authorize(identity, allowed)

        if result.is_err():
            error = result.error
            logger.warning(
                f"Authorization failed for user {identity.user_id if identity else None}: "
                f"{error.code}"
            )
            if error.code == "FORBIDDEN":
                raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)

        return result.value

    return role_gate
