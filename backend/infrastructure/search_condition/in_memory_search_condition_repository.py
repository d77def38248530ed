"""In-memory SearchCondition Repository for testing and local runs."""

import logging
from typing import Dict, List, Optional

from domain.search_condition.core.entities.search_condition import SearchCondition
from domain.search_condition.core.exceptions.search_condition_errors import (
    DuplicateSearchConditionNameError,
    SearchConditionNotFoundError,
)
from domain.search_condition.core.filters.search_condition_filter import (
    SearchConditionFilter,
    SearchConditionPredicate,
)
from domain.search_condition.core.ports.search_condition_repository import (
    ISearchConditionRepository,
)
from infrastructure.persistence.identity import new_id, store_now, to_store_precision
from infrastructure.search_condition.search_condition_mapper import from_record, to_record

logger = logging.getLogger(__name__)


class InMemorySearchConditionRepository(ISearchConditionRepository):
    """In-memory implementation of SearchCondition repository.

    Stores primitive records keyed by id. Names are unique among
    active conditions; a soft-deleted condition frees its name.
    """

    def __init__(self) -> None:
        self._rows: Dict[str, Dict] = {}

    async def find_all(
        self, filter: Optional[SearchConditionFilter] = None
    ) -> List[SearchCondition]:
        predicate = SearchConditionPredicate.from_filter(filter)
        conditions = [from_record(dict(row)) for row in reversed(list(self._rows.values()))]
        conditions.sort(key=lambda condition: condition.created_at, reverse=True)
        return [condition for condition in conditions if predicate.matches(condition)]

    async def find_by_id(self, condition_id: str) -> Optional[SearchCondition]:
        row = self._rows.get(condition_id)
        return from_record(dict(row)) if row is not None else None

    async def create(self, condition: SearchCondition) -> SearchCondition:
        record = to_record(condition)
        self._ensure_unique_name(record["name"], identifier=record["name"])

        now = store_now()
        record.update(id=new_id(), created_at=now, updated_at=now)
        self._rows[record["id"]] = record
        return from_record(dict(record))

    async def update(self, condition: SearchCondition) -> SearchCondition:
        condition_id = condition.id
        existing = self._rows.get(condition_id)
        if existing is None:
            raise SearchConditionNotFoundError(condition_id)

        record = to_record(condition)
        self._ensure_unique_name(record["name"], identifier=condition_id, exclude_id=condition_id)

        existing.update(record)
        existing["updated_at"] = to_store_precision(condition.updated_at)
        return from_record(dict(existing))

    def clear(self) -> None:
        self._rows.clear()

    def _ensure_unique_name(
        self, name: str, identifier: str, exclude_id: Optional[str] = None
    ) -> None:
        for row_id, row in self._rows.items():
            if row_id == exclude_id or row["deleted_at"] is not None:
                continue
            if row["name"] == name:
                logger.warning(
                    "Unique constraint violated",
                    extra={"resource": "search condition", "resource_id": identifier},
                )
                raise DuplicateSearchConditionNameError(identifier)
