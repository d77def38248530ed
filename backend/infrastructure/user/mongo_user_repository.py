"""MongoDB User Repository implementation."""

import logging
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

from domain.shared.errors import ConflictError
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import DuplicateEmailError, UserNotFoundError
from domain.user.core.filters.user_filter import UserFilter, UserFilterBuilder
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.persistence.identity import new_id, store_now
from infrastructure.persistence.mongodb.base import MongoBaseRepository
from infrastructure.persistence.pagination import resolve_page_window
from infrastructure.user.mongo_user_query import to_mongo_query
from infrastructure.user.user_mapper import from_record, to_record

logger = logging.getLogger(__name__)

_NEWEST_FIRST = [("created_at", DESCENDING), ("_id", DESCENDING)]


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of User repository.

    Document layout (collection "users"):
    - _id: ULID string
    - email: lowercased, unique index
    - role, first_name, last_name, gender
    - created_at/created_by, updated_at/updated_by
    - deleted_at/deleted_by: null until soft-deleted

    Examples:
        >>> repo = MongoUserRepository()
        >>> await repo.ensure_indexes()
        >>> created = await repo.create(user)
        >>> found = await repo.find_by_id(created.id)
    """

    collection_name = "users"
    resource_name = "user"

    def to_document(self, user: User) -> Dict[str, Any]:
        return to_record(user)

    def from_document(self, doc: Dict[str, Any]) -> User:
        record = dict(doc)
        record["id"] = record.pop("_id")
        for field in ("created_at", "updated_at", "deleted_at"):
            record[field] = self.as_utc(record.get(field))
        return from_record(record)

    def conflict_error(self, identifier: str) -> ConflictError:
        return DuplicateEmailError(identifier)

    async def ensure_indexes(self) -> None:
        """Create the unique email index and the listing sort index."""
        await self.collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
        await self.collection.create_index(_NEWEST_FIRST, name="created_at_desc")
        logger.info("User indexes ensured", extra={"collection": self.collection_name})

    async def find_all(self, filter: Optional[UserFilter] = None) -> List[User]:
        query = to_mongo_query(UserFilterBuilder.build(filter))
        window = resolve_page_window(filter)

        documents = await self._find_many(
            query,
            sort=_NEWEST_FIRST,
            skip=window.skip if window else None,
            limit=window.limit if window else None,
        )
        return [self.from_document(doc) for doc in documents]

    async def count(self, filter: Optional[UserFilter] = None) -> int:
        return await self._count(to_mongo_query(UserFilterBuilder.build(filter)))

    async def find_by_id(self, user_id: str) -> Optional[User]:
        doc = await self._find_one({"_id": user_id})
        return self.from_document(doc) if doc is not None else None

    async def create(self, user: User, user_id: Optional[str] = None) -> User:
        document = self.to_document(user)
        now = store_now()
        document.update(_id=user_id or new_id(), created_at=now, updated_at=now)

        await self._insert_one(document, identifier=user.email)
        return self.from_document(document)

    async def update(self, user: User) -> User:
        user_id = user.id
        fields = self.to_document(user)
        fields["updated_at"] = user.updated_at

        doc = await self._find_one_and_set(user_id, fields)
        if doc is None:
            raise UserNotFoundError(user_id)
        return self.from_document(doc)
