from datetime import timedelta
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthenticatedIdentity,
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
)
from src.depends import (
    BEARER_CHALLENGE,
    INVALID_TOKEN,
    get_current_identity,
    get_password_hasher,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class MeResponse(BaseModel):
    """Identity attached to the current request"""

    user_id: str
    role: str


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    User Login

    Verifies credentials and returns an opaque access token (the session id).

    Raises:
        - 401 Unauthorized: Invalid email or password
        - 500 Internal Server Error: Session could not be stored
    """
    use_case = LoginUseCase(
        uow,
        hasher=hasher,
        session_ttl=timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS),
    )
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Logout

    Revokes the session the gate resolved for this request. Its token is
    rejected on every later request.

    Raises:
        - 401 Unauthorized: Missing, invalid, expired or revoked token
        - 500 Internal Server Error: Revocation could not be stored
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(str(identity.session_id))

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(
                INVALID_TOKEN,
                status_code=status.HTTP_401_UNAUTHORIZED,
                headers=BEARER_CHALLENGE,
            )
        raise ServerError(error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def me(identity: AuthenticatedIdentity = Depends(get_current_identity)):
    """Return the identity resolved from the bearer token."""
    return MeResponse(user_id=str(identity.user_id), role=identity.role.value)
