"""Existence check shared by search condition mutations."""

from domain.search_condition.core.entities.search_condition import SearchCondition
from domain.search_condition.core.exceptions.search_condition_errors import (
    SearchConditionNotFoundError,
)
from domain.search_condition.core.ports.search_condition_repository import (
    ISearchConditionRepository,
)


async def get_active_condition(
    repository: ISearchConditionRepository, condition_id: str
) -> SearchCondition:
    condition = await repository.find_by_id(condition_id)
    if condition is None or condition.is_deleted:
        raise SearchConditionNotFoundError(condition_id)
    return condition
