"""Create search condition command."""

import logging
from dataclasses import dataclass

from domain.search_condition.core.entities.search_condition import SearchCondition
from domain.search_condition.core.ports.search_condition_repository import (
    ISearchConditionRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class CreateSearchConditionCommand:
    """Command to save a named filter combination.

    Examples:
        >>> command = CreateSearchConditionCommand(repository)
        >>> condition = await command.execute(
        ...     form_type="user-management",
        ...     name="Admins",
        ...     url_params="role=admin",
        ...     acting_user_id="admin1",
        ... )
    """

    repository: ISearchConditionRepository

    async def execute(
        self, form_type: str, name: str, url_params: str, acting_user_id: str
    ) -> SearchCondition:
        """Execute create command.

        Raises:
            RequiredFieldError: If form_type or name is blank
            DuplicateSearchConditionNameError: If the name is taken
        """
        condition = SearchCondition.create_new(
            form_type=form_type,
            name=name,
            url_params=url_params,
            acting_user_id=acting_user_id,
        )

        created = await self.repository.create(condition)

        logger.info(
            "Search condition created",
            extra={
                "search_condition_id": created.id,
                "form_type": created.form_type,
                "acting_user_id": acting_user_id,
            },
        )
        return created
