from datetime import timedelta
from uuid import UUID

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from src.app.use_cases.auth.login_use_case import LoginUseCase
from src.domain.entities import Session, UserRole
from tests.fixtures.factories import DEFAULT_PASSWORD, make_user


@pytest.mark.asyncio
async def test_successful_login(mock_uow, hasher):
    """Valid credentials create one session and return its id as the token"""
    user = make_user(role=UserRole.admin, email="admin@example.com", name="Admin")
    mock_uow.users.get_by_email.return_value = user

    use_case = LoginUseCase(mock_uow, hasher=hasher)
    result = await use_case.execute("admin@example.com", DEFAULT_PASSWORD)

    assert result.is_ok()
    data = result.value
    assert UUID(data.access_token)
    assert data.user.id == str(user.id)
    assert data.user.name == "Admin"
    assert data.user.email == "admin@example.com"
    assert data.user.role == "admin"
    assert not hasattr(data.user, "password_hash")

    mock_uow.users.get_by_email.assert_called_once_with("admin@example.com")
    mock_uow.sessions.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_login_session_snapshots_role_and_ttl(mock_uow, hasher):
    """Stored session carries the user's role and expires one TTL after issuance"""
    user = make_user(role=UserRole.staff)
    mock_uow.users.get_by_email.return_value = user

    use_case = LoginUseCase(mock_uow, hasher=hasher, session_ttl=timedelta(hours=24))
    result = await use_case.execute(user.email, DEFAULT_PASSWORD)

    assert result.is_ok()
    session: Session = mock_uow.sessions.create.call_args.args[0]
    assert str(session.id) == result.value.access_token
    assert session.user_id == user.id
    assert session.role == UserRole.staff
    assert session.revoked_at is None
    assert session.expired_at - session.created_at == timedelta(hours=24)


@pytest.mark.asyncio
async def test_login_uses_fresh_token_each_time(mock_uow, hasher):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    use_case = LoginUseCase(mock_uow, hasher=hasher)
    first = await use_case.execute(user.email, DEFAULT_PASSWORD)
    second = await use_case.execute(user.email, DEFAULT_PASSWORD)

    assert first.value.access_token != second.value.access_token


@pytest.mark.asyncio
async def test_login_invalid_credentials_wrong_password(mock_uow, hasher):
    mock_uow.users.get_by_email.return_value = make_user()

    use_case = LoginUseCase(mock_uow, hasher=hasher)
    result = await use_case.execute("user@example.com", "WrongPassword!")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"

    mock_uow.sessions.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_invalid_credentials_nonexistent_user(mock_uow, hasher):
    """Unknown email returns the same error as a wrong password"""
    mock_uow.users.get_by_email.return_value = None

    use_case = LoginUseCase(mock_uow, hasher=hasher)
    result = await use_case.execute("nobody@example.com", "SomePassword!")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"

    mock_uow.sessions.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_session_write_failure(mock_uow, hasher):
    """A failed session write returns an error and no token"""
    mock_uow.users.get_by_email.return_value = make_user()
    mock_uow.sessions.create.side_effect = SQLAlchemyError("disk full")

    use_case = LoginUseCase(mock_uow, hasher=hasher)
    result = await use_case.execute("user@example.com", DEFAULT_PASSWORD)

    assert result.is_err()
    assert result.error.code == "PERSISTENCE_ERROR"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_commit_failure(mock_uow, hasher):
    mock_uow.users.get_by_email.return_value = make_user()
    mock_uow.commit.side_effect = OperationalError("COMMIT", {}, Exception("db gone"))

    use_case = LoginUseCase(mock_uow, hasher=hasher)
    result = await use_case.execute("user@example.com", DEFAULT_PASSWORD)

    assert result.is_err()
    assert result.error.code == "PERSISTENCE_ERROR"
