"""Delete search condition command (soft delete)."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from application.search_condition.queries.get_active_condition import get_active_condition
from domain.search_condition.core.ports.search_condition_repository import (
    ISearchConditionRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class DeleteSearchConditionCommand:
    """Command to soft-delete a saved condition through the entity."""

    repository: ISearchConditionRepository

    async def execute(self, condition_id: str, acting_user_id: str) -> None:
        """Execute delete.

        Raises:
            SearchConditionNotFoundError: If absent or already deleted
        """
        condition = await get_active_condition(self.repository, condition_id)

        condition.delete(acting_user_id, datetime.now(timezone.utc))

        await self.repository.update(condition)

        logger.info(
            "Search condition deleted",
            extra={"search_condition_id": condition_id, "acting_user_id": acting_user_id},
        )
