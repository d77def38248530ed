"""Update (rename) search condition command."""

import logging
from dataclasses import dataclass

from application.search_condition.queries.get_active_condition import get_active_condition
from domain.search_condition.core.entities.search_condition import SearchCondition
from domain.search_condition.core.ports.search_condition_repository import (
    ISearchConditionRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class UpdateSearchConditionCommand:
    """Command to rename a saved condition. Other fields are immutable."""

    repository: ISearchConditionRepository

    async def execute(
        self, condition_id: str, name: str, acting_user_id: str
    ) -> SearchCondition:
        """Execute rename.

        Raises:
            SearchConditionNotFoundError: If absent or soft-deleted
            RequiredFieldError: If name is blank
            DuplicateSearchConditionNameError: If the name is taken
        """
        condition = await get_active_condition(self.repository, condition_id)

        condition.change_name(name, acting_user_id)

        updated = await self.repository.update(condition)

        logger.info(
            "Search condition renamed",
            extra={"search_condition_id": condition_id, "acting_user_id": acting_user_id},
        )
        return updated
