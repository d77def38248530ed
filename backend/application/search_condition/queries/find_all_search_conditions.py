"""Find all search conditions query."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from domain.search_condition.core.entities.search_condition import SearchCondition
from domain.search_condition.core.filters.search_condition_filter import SearchConditionFilter
from domain.search_condition.core.ports.search_condition_repository import (
    ISearchConditionRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class FindAllSearchConditionsQuery:
    """Query: active saved conditions, newest first, optionally for one form."""

    repository: ISearchConditionRepository

    async def execute(self, form_type: Optional[str] = None) -> List[SearchCondition]:
        filter: SearchConditionFilter = {}
        if form_type:
            filter["form_type"] = form_type

        conditions = await self.repository.find_all(filter)

        logger.info(
            "Search conditions listed",
            extra={"form_type": form_type, "count": len(conditions)},
        )
        return conditions
