"""Unit tests for UserService against the in-memory repository."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from user_management_api.app.core.exceptions import ResourceNotFoundError, UserNotFoundError
from user_management_api.app.schemas.user import UserDto
from user_management_api.app.services.user_service import UserService


@pytest.mark.asyncio
async def test_create_user_assigns_id_and_echoes_fields(service, emma):
    created = await service.create_user(emma)

    assert created.id is not None
    assert created.first_name == "Emma"
    assert created.last_name == "Watson"
    assert created.email == "emma.watson@example.com"
    assert created.date_of_birth == date(1990, 4, 15)


@pytest.mark.asyncio
async def test_create_user_ignores_supplied_id(service, emma):
    first = await service.create_user(emma)
    emma.id = 999

    second = await service.create_user(emma)

    assert second.id != 999
    assert second.id != first.id


@pytest.mark.asyncio
async def test_get_user_by_id_returns_stored_record(service, emma):
    created = await service.create_user(emma)

    assert await service.get_user_by_id(created.id) == created


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["get", "update", "delete"])
async def test_missing_user_raises_not_found(service, emma, operation):
    with pytest.raises(UserNotFoundError) as exc_info:
        if operation == "get":
            await service.get_user_by_id(42)
        elif operation == "update":
            await service.update_user(42, emma)
        else:
            await service.delete_user(42)

    assert str(exc_info.value) == "User not found with id: 42"
    assert exc_info.value.message == "User not found with id: 42"
    assert exc_info.value.user_id == 42
    assert isinstance(exc_info.value, ResourceNotFoundError)


@pytest.mark.asyncio
async def test_get_all_users(service, emma):
    assert await service.get_all_users() == []

    for n in range(3):
        emma.email = f"emma{n}@example.com"
        await service.create_user(emma)

    users = await service.get_all_users()
    assert len(users) == 3
    assert {u.email for u in users} == {"emma0@example.com", "emma1@example.com", "emma2@example.com"}


@pytest.mark.asyncio
async def test_update_user_replaces_every_field(service, emma):
    created = await service.create_user(emma)
    replacement = UserDto(id=12345, first_name="Hermione", last_name="Granger", email="hg@example.com")

    updated = await service.update_user(created.id, replacement)

    assert updated.id == created.id
    assert updated.first_name == "Hermione"
    assert updated.last_name == "Granger"
    assert updated.email == "hg@example.com"
    # Omitted date is cleared, not merged from the old record.
    assert updated.date_of_birth is None
    assert await service.get_user_by_id(created.id) == updated


@pytest.mark.asyncio
async def test_delete_user_removes_record(service, emma):
    created = await service.create_user(emma)

    await service.delete_user(created.id)

    with pytest.raises(UserNotFoundError):
        await service.get_user_by_id(created.id)


@pytest.mark.asyncio
async def test_delete_checks_existence_before_deleting():
    repository = MagicMock()
    repository.exists_by_id.return_value = False

    with pytest.raises(UserNotFoundError):
        await UserService(repository).delete_user(1)

    repository.delete_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_repository_errors_propagate(emma):
    repository = MagicMock()
    repository.save.side_effect = RuntimeError("disk full")

    with pytest.raises(RuntimeError, match="disk full"):
        await UserService(repository).create_user(emma)


@pytest.mark.asyncio
async def test_create_update_delete_scenario(service, emma):
    created = await service.create_user(emma)
    assert created.id is not None

    updated = await service.update_user(
        created.id,
        UserDto(
            first_name="Emma",
            last_name="Granger",
            email="emma.granger@example.com",
            date_of_birth=date(1990, 4, 15),
        ),
    )
    assert updated.last_name == "Granger"
    assert updated.email == "emma.granger@example.com"

    await service.delete_user(created.id)
    with pytest.raises(UserNotFoundError, match=f"^User not found with id: {created.id}$"):
        await service.get_user_by_id(created.id)
