from uuid import uuid4

import pytest

from src.app.use_cases.users import UpdateUserCommand, UpdateUserUseCase
from src.domain.entities import UserRole
from tests.fixtures.factories import make_identity, make_user


@pytest.mark.asyncio
async def test_admin_cannot_update_super_admin(mock_uow):
    target = make_user(role=UserRole.super_admin)
    mock_uow.users.get_by_id.return_value = target
    requester = make_identity(UserRole.admin)

    result = await UpdateUserUseCase(mock_uow).execute(
        requester, target.id, UpdateUserCommand(name="Hacker", role="admin")
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert result.error.message == "forbidden: admin cannot modify a super_admin"
    mock_uow.users.get_by_id.assert_called_once_with(target.id)
    mock_uow.users.update.assert_not_called()
    assert target.name == "Test User"
    assert target.role == UserRole.super_admin


@pytest.mark.asyncio
async def test_admin_updates_staff(mock_uow):
    target = make_user(role=UserRole.staff)
    mock_uow.users.get_by_id.return_value = target
    requester = make_identity(UserRole.admin)

    result = await UpdateUserUseCase(mock_uow).execute(
        requester, target.id, UpdateUserCommand(name="Renamed", role="admin")
    )

    assert result.is_ok()
    assert result.value.name == "Renamed"
    assert result.value.role == "admin"
    mock_uow.users.update.assert_called_once_with(target)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_admin_cannot_promote_to_super_admin(mock_uow):
    target = make_user(role=UserRole.staff)
    mock_uow.users.get_by_id.return_value = target
    requester = make_identity(UserRole.admin)

    result = await UpdateUserUseCase(mock_uow).execute(
        requester, target.id, UpdateUserCommand(name="Staff", role="super_admin")
    )

    assert result.is_err()
    assert result.error.message == "forbidden: admin cannot promote a user to super_admin"
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_super_admin_promotes_admin(mock_uow):
    target = make_user(role=UserRole.admin)
    mock_uow.users.get_by_id.return_value = target
    requester = make_identity(UserRole.super_admin)

    result = await UpdateUserUseCase(mock_uow).execute(
        requester, target.id, UpdateUserCommand(name="Boss", role="super_admin")
    )

    assert result.is_ok()
    assert result.value.role == "super_admin"


@pytest.mark.asyncio
async def test_update_missing_user(mock_uow):
    mock_uow.users.get_by_id.return_value = None
    requester = make_identity(UserRole.super_admin)

    result = await UpdateUserUseCase(mock_uow).execute(
        requester, uuid4(), UpdateUserCommand(name="Ghost", role="staff")
    )

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_invalid_role(mock_uow):
    requester = make_identity(UserRole.super_admin)

    result = await UpdateUserUseCase(mock_uow).execute(
        requester, uuid4(), UpdateUserCommand(name="Someone", role="manager")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    mock_uow.users.get_by_id.assert_not_called()
