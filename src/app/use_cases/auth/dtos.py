"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import UserRole


# ============================================================================
# Request-scoped identity
# ============================================================================


class AuthenticatedIdentity(BaseModel):
    """Identity attached to a request after its session resolved"""

    model_config = ConfigDict(frozen=True)

    user_id: UUID
    role: UserRole
    session_id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Sanitized user returned alongside the access token"""

    id: str
    name: str
    email: str
    role: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    access_token: str
    user: UserInfo


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    message: str
