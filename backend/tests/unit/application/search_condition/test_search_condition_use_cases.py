"""Tests for search condition commands and queries."""

import pytest

from application.search_condition.commands.create_search_condition import (
    CreateSearchConditionCommand,
)
from application.search_condition.commands.delete_search_condition import (
    DeleteSearchConditionCommand,
)
from application.search_condition.commands.update_search_condition import (
    UpdateSearchConditionCommand,
)
from application.search_condition.queries.find_all_search_conditions import (
    FindAllSearchConditionsQuery,
)
from domain.search_condition.core.exceptions.search_condition_errors import (
    DuplicateSearchConditionNameError,
    SearchConditionNotFoundError,
)
from domain.shared.errors import RequiredFieldError


@pytest.fixture
def create_command(search_condition_repository):
    return CreateSearchConditionCommand(search_condition_repository)


async def save(command, name="Admins", form_type="user-management"):
    return await command.execute(
        form_type=form_type, name=name, url_params="role=admin", acting_user_id="admin1"
    )


@pytest.mark.asyncio
async def test_create(create_command):
    condition = await save(create_command)

    assert condition.is_persisted
    assert condition.created_by == "admin1"
    assert condition.url_params == "role=admin"


@pytest.mark.asyncio
async def test_create_requires_name(create_command):
    with pytest.raises(RequiredFieldError):
        await save(create_command, name=" ")


@pytest.mark.asyncio
async def test_create_duplicate_name(create_command):
    await save(create_command)

    with pytest.raises(DuplicateSearchConditionNameError) as exc_info:
        await save(create_command)

    assert str(exc_info.value) == "A search condition with this name already exists"


@pytest.mark.asyncio
async def test_rename(create_command, search_condition_repository):
    condition = await save(create_command)

    renamed = await UpdateSearchConditionCommand(search_condition_repository).execute(
        condition_id=condition.id, name="Admins only", acting_user_id="admin2"
    )

    assert renamed.name == "Admins only"
    assert renamed.updated_by == "admin2"
    assert renamed.form_type == "user-management"


@pytest.mark.asyncio
async def test_delete_then_operations_fail(create_command, search_condition_repository):
    condition = await save(create_command)
    delete = DeleteSearchConditionCommand(search_condition_repository)

    await delete.execute(condition.id, acting_user_id="admin2")

    stored = await search_condition_repository.find_by_id(condition.id)
    assert stored.deleted_by == "admin2"
    assert stored.deleted_at is not None
    with pytest.raises(SearchConditionNotFoundError):
        await delete.execute(condition.id, acting_user_id="admin2")
    with pytest.raises(SearchConditionNotFoundError):
        await UpdateSearchConditionCommand(search_condition_repository).execute(
            condition_id=condition.id, name="x", acting_user_id="admin2"
        )


@pytest.mark.asyncio
async def test_find_all_by_form_type(create_command, search_condition_repository):
    await save(create_command, name="A")
    await save(create_command, name="B", form_type="other-form")
    query = FindAllSearchConditionsQuery(search_condition_repository)

    assert [c.name for c in await query.execute(form_type="other-form")] == ["B"]
    assert len(await query.execute()) == 2


@pytest.mark.asyncio
async def test_name_is_reusable_after_delete(create_command, search_condition_repository):
    condition = await save(create_command)
    await DeleteSearchConditionCommand(search_condition_repository).execute(
        condition.id, acting_user_id="admin2"
    )

    recreated = await save(create_command)

    assert recreated.id != condition.id
    assert recreated.name == condition.name
