"""SearchCondition entity - a named, reusable filter combination."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from domain.shared.errors import RequiredFieldError, UnsetFieldError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require(field: str, value: str) -> str:
    trimmed = (value or "").strip()
    if not trimmed:
        raise RequiredFieldError(field)
    return trimmed


class SearchCondition:
    """Saved search condition.

    Holds the form it applies to (form_type), an operator-chosen name
    (unique among stored conditions) and the serialized filter
    (url_params, opaque to the backend).

    Lifecycle mirrors User: create_new() leaves id/timestamps unset until
    the repository persists the condition, reconstruct() rehydrates it.
    """

    def __init__(
        self,
        *,
        form_type: str,
        name: str,
        url_params: str,
        created_by: str,
        updated_by: str,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        deleted_at: Optional[datetime] = None,
        deleted_by: Optional[str] = None,
    ) -> None:
        self._id = id
        self._form_type = form_type
        self._name = name
        self._url_params = url_params
        self._created_at = created_at
        self._created_by = created_by
        self._updated_at = updated_at
        self._updated_by = updated_by
        self._deleted_at = deleted_at
        self._deleted_by = deleted_by

    @staticmethod
    def create_new(
        form_type: str,
        name: str,
        url_params: str,
        acting_user_id: str,
    ) -> "SearchCondition":
        """Create a condition that has never been stored.

        Raises:
            RequiredFieldError: If form_type or name is blank
        """
        return SearchCondition(
            form_type=_require("form_type", form_type),
            name=_require("name", name),
            url_params=url_params or "",
            created_by=acting_user_id,
            updated_by=acting_user_id,
        )

    @staticmethod
    def reconstruct(
        id: str,
        form_type: str,
        name: str,
        url_params: str,
        created_at: datetime,
        created_by: str,
        updated_at: datetime,
        updated_by: str,
        deleted_at: Optional[datetime] = None,
        deleted_by: Optional[str] = None,
    ) -> "SearchCondition":
        return SearchCondition(
            id=id,
            form_type=form_type,
            name=name,
            url_params=url_params,
            created_at=created_at,
            created_by=created_by,
            updated_at=updated_at,
            updated_by=updated_by,
            deleted_at=deleted_at,
            deleted_by=deleted_by,
        )

    @property
    def id(self) -> str:
        if self._id is None:
            raise UnsetFieldError("id")
        return self._id

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @property
    def form_type(self) -> str:
        return self._form_type

    @property
    def name(self) -> str:
        return self._name

    @property
    def url_params(self) -> str:
        return self._url_params

    @property
    def created_at(self) -> datetime:
        if self._created_at is None:
            raise UnsetFieldError("created_at")
        return self._created_at

    @property
    def created_by(self) -> str:
        return self._created_by

    @property
    def updated_at(self) -> datetime:
        if self._updated_at is None:
            raise UnsetFieldError("updated_at")
        return self._updated_at

    @property
    def updated_by(self) -> str:
        return self._updated_by

    @property
    def deleted_at(self) -> Optional[datetime]:
        return self._deleted_at

    @property
    def deleted_by(self) -> Optional[str]:
        return self._deleted_by

    @property
    def is_deleted(self) -> bool:
        return self._deleted_at is not None

    def change_name(self, name: str, acting_user_id: str) -> None:
        """Rename the condition.

        Raises:
            RequiredFieldError: If name is blank
        """
        self._name = _require("name", name)
        self._touch(acting_user_id)

    def delete(self, acting_user_id: str, deleted_at: datetime) -> None:
        """Soft-delete with a caller-supplied timestamp."""
        self._deleted_at = deleted_at
        self._deleted_by = acting_user_id
        self._touch(acting_user_id)

    def _touch(self, acting_user_id: str) -> None:
        self._updated_at = _utcnow()
        self._updated_by = acting_user_id

    def to_primitives(self) -> Dict[str, Any]:
        """Flatten into a plain record.

        Raises:
            UnsetFieldError: If the condition has not been persisted yet
        """
        return {
            "id": self.id,
            "form_type": self.form_type,
            "name": self.name,
            "url_params": self.url_params,
            "created_at": self.created_at,
            "created_by": self.created_by,
            "updated_at": self.updated_at,
            "updated_by": self.updated_by,
            "deleted_at": self.deleted_at,
            "deleted_by": self.deleted_by,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchCondition):
            return False
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"SearchCondition(id={self._id!r}, form_type={self._form_type!r}, name={self._name!r})"
