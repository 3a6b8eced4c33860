"""
Session Entity

Server-side login session; its id is the bearer token.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import UserRole


class Session(SQLModel, table=True):
    """
    Session entity - proves a successful login.

    Business Rules:
    - id is a random UUID4 handed to the client as the access token
    - role is a snapshot taken at login, not re-read per request
    - Valid iff revoked_at IS NULL and expired_at > now
    - revoked_at is written once, by logout
    - Expiry is computed, never written; rows are never deleted
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    role: UserRole

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expired_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_session_expired_at", "expired_at"),)
