from uuid import uuid4

import pytest

from src.app.use_cases.users import DeleteUserUseCase
from src.domain.entities import UserRole
from tests.fixtures.factories import make_identity, make_user


@pytest.mark.asyncio
async def test_super_admin_deletes_super_admin(mock_uow):
    target = make_user(role=UserRole.super_admin)
    mock_uow.users.get_by_id.return_value = target
    requester = make_identity(UserRole.super_admin)

    result = await DeleteUserUseCase(mock_uow).execute(requester, target.id)

    assert result.is_ok()
    assert result.value["user_id"] == str(target.id)
    mock_uow.users.soft_delete.assert_called_once_with(target)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_admin_cannot_delete_super_admin(mock_uow):
    target = make_user(role=UserRole.super_admin)
    mock_uow.users.get_by_id.return_value = target
    requester = make_identity(UserRole.admin)

    result = await DeleteUserUseCase(mock_uow).execute(requester, target.id)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert result.error.message == "forbidden: admin cannot delete a super_admin"
    mock_uow.users.soft_delete.assert_not_called()


@pytest.mark.asyncio
async def test_admin_deletes_staff(mock_uow):
    target = make_user(role=UserRole.staff)
    mock_uow.users.get_by_id.return_value = target
    requester = make_identity(UserRole.admin)

    result = await DeleteUserUseCase(mock_uow).execute(requester, target.id)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_delete_missing_user(mock_uow):
    requester = make_identity(UserRole.super_admin)

    result = await DeleteUserUseCase(mock_uow).execute(requester, uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
