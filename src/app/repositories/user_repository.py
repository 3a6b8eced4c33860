from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get active user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get active user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def soft_delete(self, user: User) -> User:
        """Mark user as deleted"""
        pass

    @abstractmethod
    async def count(self, search: str = "") -> int:
        """Count active users whose name or email matches search"""
        pass

    @abstractmethod
    async def list(self, limit: int, offset: int, search: str = "") -> List[User]:
        """List active users ordered by name"""
        pass
