from typing import Optional
from uuid import UUID

from sqlmodel import col, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.domain.base import utcnow
from src.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: Session) -> Session:
        """Persist a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID regardless of validity"""
        stmt = select(Session).where(Session.id == session_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_valid(self, session_id: UUID) -> Optional[Session]:
        """
        Get session only if it is currently valid.

        Revocation and expiry are part of the WHERE clause so the check is a
        single read; missing, revoked and expired sessions all come back as None.
        """
        stmt = select(Session).where(
            Session.id == session_id,
            col(Session.revoked_at).is_(None),
            col(Session.expired_at) > utcnow(),
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def revoke(self, session_id: UUID) -> bool:
        """Revoke a session; a second revoke leaves the first revoked_at untouched"""
        stmt = (
            update(Session)
            .where(Session.id == session_id, col(Session.revoked_at).is_(None))
            .values(revoked_at=utcnow())
        )
        result = await self.session.exec(stmt)
        await self.session.flush()
        return result.rowcount > 0
