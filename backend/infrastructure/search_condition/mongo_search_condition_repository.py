"""MongoDB SearchCondition Repository implementation."""

import logging
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

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
from domain.shared.errors import ConflictError
from infrastructure.persistence.identity import new_id, store_now
from infrastructure.persistence.mongodb.base import MongoBaseRepository
from infrastructure.search_condition.search_condition_mapper import from_record, to_record

logger = logging.getLogger(__name__)

_NEWEST_FIRST = [("created_at", DESCENDING), ("_id", DESCENDING)]


def to_mongo_query(predicate: SearchConditionPredicate) -> Dict[str, Any]:
    query: Dict[str, Any] = {}
    if not predicate.include_deleted:
        query["deleted_at"] = None
    if predicate.form_type is not None:
        query["form_type"] = predicate.form_type
    return query


class MongoSearchConditionRepository(MongoBaseRepository[SearchCondition], ISearchConditionRepository):
    """MongoDB implementation of SearchCondition repository.

    Collection "search_conditions". Names are unique among documents
    whose deleted_at is null (partial index).
    """

    collection_name = "search_conditions"
    resource_name = "search condition"

    def to_document(self, condition: SearchCondition) -> Dict[str, Any]:
        return to_record(condition)

    def from_document(self, doc: Dict[str, Any]) -> SearchCondition:
        record = dict(doc)
        record["id"] = record.pop("_id")
        for field in ("created_at", "updated_at", "deleted_at"):
            record[field] = self.as_utc(record.get(field))
        return from_record(record)

    def conflict_error(self, identifier: str) -> ConflictError:
        return DuplicateSearchConditionNameError(identifier)

    async def ensure_indexes(self) -> None:
        """Create the active-name unique index and the per-form listing index."""
        await self.collection.create_index(
            [("name", ASCENDING)],
            unique=True,
            name="name_unique_active",
            partialFilterExpression={"deleted_at": {"$type": "null"}},
        )
        await self.collection.create_index(
            [("form_type", ASCENDING)] + _NEWEST_FIRST, name="form_type_created_at_desc"
        )
        logger.info("Search condition indexes ensured", extra={"collection": self.collection_name})

    async def find_all(
        self, filter: Optional[SearchConditionFilter] = None
    ) -> List[SearchCondition]:
        query = to_mongo_query(SearchConditionPredicate.from_filter(filter))
        documents = await self._find_many(query, sort=_NEWEST_FIRST)
        return [self.from_document(doc) for doc in documents]

    async def find_by_id(self, condition_id: str) -> Optional[SearchCondition]:
        doc = await self._find_one({"_id": condition_id})
        return self.from_document(doc) if doc is not None else None

    async def create(self, condition: SearchCondition) -> SearchCondition:
        document = self.to_document(condition)
        now = store_now()
        document.update(_id=new_id(), created_at=now, updated_at=now)

        await self._insert_one(document, identifier=condition.name)
        return self.from_document(document)

    async def update(self, condition: SearchCondition) -> SearchCondition:
        condition_id = condition.id
        fields = self.to_document(condition)
        fields["updated_at"] = condition.updated_at

        doc = await self._find_one_and_set(condition_id, fields)
        if doc is None:
            raise SearchConditionNotFoundError(condition_id)
        return self.from_document(doc)
