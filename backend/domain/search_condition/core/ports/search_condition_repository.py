"""Search condition repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.search_condition.core.entities.search_condition import SearchCondition
from domain.search_condition.core.filters.search_condition_filter import (
    SearchConditionFilter,
)


class ISearchConditionRepository(ABC):
    """Repository interface for SearchCondition aggregate."""

    @abstractmethod
    async def find_all(
        self, filter: Optional[SearchConditionFilter] = None
    ) -> List[SearchCondition]:
        """Find conditions matching filter, newest first.

        Soft-deleted conditions are excluded unless include_deleted is set.
        """
        pass

    @abstractmethod
    async def find_by_id(self, condition_id: str) -> Optional[SearchCondition]:
        """Find condition by id, including soft-deleted ones.

        Returns:
            SearchCondition if stored, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, condition: SearchCondition) -> SearchCondition:
        """Persist a new condition, assigning id and timestamps.

        Raises:
            ConflictError: If the name is already taken
        """
        pass

    @abstractmethod
    async def update(self, condition: SearchCondition) -> SearchCondition:
        """Persist every mutable field of an existing condition.

        Raises:
            ConflictError: If the new name is already taken
            UnsetFieldError: If the condition has no id
        """
        pass
