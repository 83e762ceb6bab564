import pytest

from digiwallet.modules.common.exceptions import InvalidArgumentError
from digiwallet.modules.common.types import EntityStatus, UserRole
from digiwallet.modules.users import UserAlreadyExistsError, UserCreateInput, UserNotFoundError


async def test_create_and_get_user(services):
    created = await services.users.create_user(
        UserCreateInput(username="  alice ", full_name="Alice Doe", email="alice@example.com")
    )

    fetched = await services.users.get_user(created.id)

    assert fetched.username == "alice"
    assert fetched.full_name == "Alice Doe"
    assert fetched.role is UserRole.USER
    assert fetched.status is EntityStatus.ACTIVE
    assert fetched.created_at is not None


async def test_duplicate_username(services):
    await services.users.create_user(UserCreateInput(username="alice"))

    with pytest.raises(UserAlreadyExistsError) as excinfo:
        await services.users.create_user(UserCreateInput(username="alice"))

    assert "alice" in excinfo.value.message


async def test_blank_username(services):
    with pytest.raises(InvalidArgumentError):
        await services.users.create_user(UserCreateInput(username="   "))


async def test_unknown_user(services):
    with pytest.raises(UserNotFoundError):
        await services.users.get_user(5)
    with pytest.raises(UserNotFoundError):
        await services.users.toggle_status(5)


async def test_toggle_status(services):
    user = await services.users.create_user(UserCreateInput(username="alice"))

    first = await services.users.toggle_status(user.id)
    second = await services.users.toggle_status(user.id)

    assert first.status is EntityStatus.INACTIVE
    assert second.status is EntityStatus.ACTIVE


async def test_list_and_find_by_username(services):
    await services.users.create_user(UserCreateInput(username="alice"))
    await services.users.create_user(UserCreateInput(username="bob", role=UserRole.ADMIN))

    users = await services.users.list_users()

    assert [u.username for u in users] == ["alice", "bob"]
    assert (await services.users.get_by_username("bob")).role is UserRole.ADMIN
    assert await services.users.get_by_username("carol") is None
