import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.password_hasher import PasswordHasher


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.soft_delete = AsyncMock(side_effect=lambda user: user)
    uow.users.count = AsyncMock(return_value=0)
    uow.users.list = AsyncMock(return_value=[])

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.get_by_id = AsyncMock(return_value=None)
    uow.sessions.get_valid = AsyncMock(return_value=None)
    uow.sessions.revoke = AsyncMock(return_value=True)
    return uow


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)
