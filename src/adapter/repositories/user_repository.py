from typing import List, Optional
from uuid import UUID

from sqlmodel import col, func, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.base import utcnow
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _matches(search: str):
        pattern = f"%{search}%"
        return or_(col(User.name).ilike(pattern), col(User.email).ilike(pattern))

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get active user by email address"""
        stmt = select(User).where(User.email == email, col(User.deleted_at).is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get active user by ID"""
        stmt = select(User).where(User.id == user_id, col(User.deleted_at).is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        user.updated_at = utcnow()
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def soft_delete(self, user: User) -> User:
        """Mark user as deleted"""
        user.deleted_at = utcnow()
        return await self.update(user)

    async def count(self, search: str = "") -> int:
        """Count active users whose name or email matches search"""
        stmt = (
            select(func.count())
            .select_from(User)
            .where(col(User.deleted_at).is_(None), self._matches(search))
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def list(self, limit: int, offset: int, search: str = "") -> List[User]:
        """List active users ordered by name"""
        stmt = (
            select(User)
            .where(col(User.deleted_at).is_(None), self._matches(search))
            .order_by(col(User.name).asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
