"""Tests for GetMeQuery."""

import pytest

from application.me.queries.get_me import DEFAULT_ADMIN_PROFILE, GetMeQuery
from application.user.commands.create_user import CreateUserCommand
from application.user.commands.delete_user import DeleteUserCommand
from domain.user.core.value_objects.user_role import UserRole


@pytest.mark.asyncio
async def test_resolves_stored_user(user_repository):
    user = await CreateUserCommand(user_repository).execute(
        email="hanako@example.com",
        role=UserRole.USER,
        first_name="花子",
        last_name="佐藤",
        gender=None,
        acting_user_id="system",
    )

    me = await GetMeQuery(user_repository).execute(user.id)

    assert me.id == user.id
    assert me.name == "佐藤 花子"
    assert me.email == "hanako@example.com"
    assert me.role == UserRole.USER


@pytest.mark.asyncio
async def test_unknown_actor_gets_default_admin(user_repository):
    me = await GetMeQuery(user_repository).execute("system")

    assert me == DEFAULT_ADMIN_PROFILE
    assert me.id == "admin"
    assert me.role == UserRole.ADMIN


@pytest.mark.asyncio
async def test_deleted_actor_gets_default_admin(user_repository):
    user = await CreateUserCommand(user_repository).execute(
        email="gone@example.com",
        role=UserRole.USER,
        first_name="A",
        last_name="B",
        gender=None,
        acting_user_id="system",
    )
    await DeleteUserCommand(user_repository).execute(user.id, acting_user_id="system")

    assert await GetMeQuery(user_repository).execute(user.id) == DEFAULT_ADMIN_PROFILE
