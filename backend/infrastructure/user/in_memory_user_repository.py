"""In-memory User Repository for testing and local runs."""

import logging
from typing import Dict, List, Optional

from domain.user.core.exceptions.user_errors import DuplicateEmailError, UserNotFoundError
from domain.user.core.entities.user import User
from domain.user.core.filters.user_filter import UserFilter, UserFilterBuilder
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.persistence.identity import new_id, store_now, to_store_precision
from infrastructure.persistence.pagination import resolve_page_window
from infrastructure.user.user_mapper import from_record, to_record

logger = logging.getLogger(__name__)


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository.

    Stores primitive records keyed by id, never entity instances, so a
    caller mutating a returned User cannot change stored state without
    going through update(). Enforces the unique email constraint the
    way the document store does (across all rows, deleted included).

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = User.create_new("a@b.com", UserRole.USER, "Taro", "Yamada", None, "system")
        >>> created = await repo.create(user)
        >>> found = await repo.find_by_id(created.id)
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._rows: Dict[str, Dict] = {}

    async def find_all(self, filter: Optional[UserFilter] = None) -> List[User]:
        matches = self._matching(filter)
        window = resolve_page_window(filter)
        if window is not None:
            matches = matches[window.skip : window.skip + window.limit]
        return matches

    async def count(self, filter: Optional[UserFilter] = None) -> int:
        return len(self._matching(filter))

    async def find_by_id(self, user_id: str) -> Optional[User]:
        row = self._rows.get(user_id)
        return from_record(dict(row)) if row is not None else None

    async def create(self, user: User, user_id: Optional[str] = None) -> User:
        record = to_record(user)
        self._ensure_unique_email(record["email"], identifier=record["email"])
        if user_id is not None and user_id in self._rows:
            raise DuplicateEmailError(user_id)

        now = store_now()
        record.update(id=user_id or new_id(), created_at=now, updated_at=now)
        self._rows[record["id"]] = record

        logger.debug("User row inserted", extra={"user_id": record["id"]})
        return from_record(dict(record))

    async def update(self, user: User) -> User:
        user_id = user.id
        existing = self._rows.get(user_id)
        if existing is None:
            raise UserNotFoundError(user_id)

        record = to_record(user)
        self._ensure_unique_email(record["email"], identifier=user_id, exclude_id=user_id)

        existing.update(record)
        existing["updated_at"] = to_store_precision(user.updated_at)
        return from_record(dict(existing))

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._rows.clear()

    def _matching(self, filter: Optional[UserFilter]) -> List[User]:
        predicate = UserFilterBuilder.build(filter)
        users = [from_record(dict(row)) for row in reversed(list(self._rows.values()))]
        # Stable sort: equal timestamps keep most-recent-insert first
        users.sort(key=lambda user: user.created_at, reverse=True)
        return [user for user in users if predicate.matches(user)]

    def _ensure_unique_email(
        self, email: str, identifier: str, exclude_id: Optional[str] = None
    ) -> None:
        for row_id, row in self._rows.items():
            if row_id != exclude_id and row["email"] == email:
                logger.warning(
                    "Unique constraint violated",
                    extra={"resource": "user", "resource_id": identifier},
                )
                raise DuplicateEmailError(identifier)
