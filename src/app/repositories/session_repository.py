from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Persist a new session"""
        pass

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID regardless of validity"""
        pass

    @abstractmethod
    async def get_valid(self, session_id: UUID) -> Optional[Session]:
        """Get session only if it is neither revoked nor expired"""
        pass

    @abstractmethod
    async def revoke(self, session_id: UUID) -> bool:
        """Revoke a session if not already revoked. Returns True if this call revoked it."""
        pass
