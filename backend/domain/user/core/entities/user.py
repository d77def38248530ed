"""User entity - aggregate root."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from domain.shared.errors import UnsetFieldError
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.person_name import PersonName
from domain.user.core.value_objects.user_role import UserRole


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User:
    """User aggregate root.

    A directory entry with identity, role, name, optional gender, audit
    fields and soft-delete state.

    Two construction paths, never overlapping:
    - create_new(): a brand-new user; id and timestamps stay unset until
      the repository persists it.
    - reconstruct(): rehydration of a stored record; all fields supplied.

    Invariants:
    - email is always lowercased and contains "@"
    - first/last name are non-empty after trimming
    - every mutation updates updated_at/updated_by

    Examples:
        >>> user = User.create_new(
        ...     email="Taro@Example.com",
        ...     role=UserRole.USER,
        ...     first_name="太郎",
        ...     last_name="山田",
        ...     gender=Gender.MALE,
        ...     acting_user_id="system",
        ... )
        >>> user.email
        'taro@example.com'
        >>> user.full_name
        '山田 太郎'
    """

    def __init__(
        self,
        *,
        email: Email,
        role: UserRole,
        name: PersonName,
        gender: Optional[Gender],
        created_by: str,
        updated_by: str,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        deleted_at: Optional[datetime] = None,
        deleted_by: Optional[str] = None,
    ) -> None:
        """Use create_new() or reconstruct() instead of calling this directly."""
        self._id = id
        self._email = email
        self._role = UserRole(role)
        self._name = name
        self._gender = Gender(gender) if gender is not None else None
        self._created_at = created_at
        self._created_by = created_by
        self._updated_at = updated_at
        self._updated_by = updated_by
        self._deleted_at = deleted_at
        self._deleted_by = deleted_by

    @staticmethod
    def create_new(
        email: str,
        role: UserRole,
        first_name: str,
        last_name: str,
        gender: Optional[Gender],
        acting_user_id: str,
    ) -> "User":
        """Factory method to create a user that has never been stored.

        Args:
            email: Raw email address
            role: User role
            first_name: Given name
            last_name: Family name
            gender: Optional gender
            acting_user_id: Identity performing the creation

        Returns:
            New User without id or timestamps

        Raises:
            RequiredFieldError: If email or a name part is blank
            InvalidFormatError: If email has no "@"
        """
        return User(
            email=Email.create(email),
            role=role,
            name=PersonName.create(first_name=first_name, last_name=last_name),
            gender=gender,
            created_by=acting_user_id,
            updated_by=acting_user_id,
            deleted_at=None,
            deleted_by=None,
        )

    @staticmethod
    def reconstruct(
        id: str,
        email: Email,
        role: UserRole,
        name: PersonName,
        gender: Optional[Gender],
        created_at: datetime,
        created_by: str,
        updated_at: datetime,
        updated_by: str,
        deleted_at: Optional[datetime] = None,
        deleted_by: Optional[str] = None,
    ) -> "User":
        """Rehydrate a previously persisted user.

        Only repositories call this; all values are taken as already valid.
        """
        return User(
            id=id,
            email=email,
            role=role,
            name=name,
            gender=gender,
            created_at=created_at,
            created_by=created_by,
            updated_at=updated_at,
            updated_by=updated_by,
            deleted_at=deleted_at,
            deleted_by=deleted_by,
        )

    # ============================================================
    # Accessors
    # ============================================================

    @property
    def id(self) -> str:
        if self._id is None:
            raise UnsetFieldError("id")
        return self._id

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def first_name(self) -> str:
        return self._name.first_name

    @property
    def last_name(self) -> str:
        return self._name.last_name

    @property
    def full_name(self) -> str:
        return self._name.full_name

    @property
    def gender(self) -> Optional[Gender]:
        return self._gender

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

    # ============================================================
    # Mutations
    # ============================================================

    def change_name(self, first_name: str, last_name: str, acting_user_id: str) -> None:
        """Replace first and last name.

        Raises:
            RequiredFieldError: If either part is blank
        """
        self._name = PersonName.create(first_name=first_name, last_name=last_name)
        self._touch(acting_user_id)

    def change_email(self, email: str, acting_user_id: str) -> None:
        """Replace email address.

        Raises:
            RequiredFieldError: If blank
            InvalidFormatError: If no "@"
        """
        self._email = Email.create(email)
        self._touch(acting_user_id)

    def change_role(self, role: UserRole, acting_user_id: str) -> None:
        self._role = UserRole(role)
        self._touch(acting_user_id)

    def change_gender(self, gender: Optional[Gender], acting_user_id: str) -> None:
        self._gender = Gender(gender) if gender is not None else None
        self._touch(acting_user_id)

    def delete(self, acting_user_id: str, deleted_at: datetime) -> None:
        """Soft-delete the user.

        The deletion timestamp is supplied by the caller so that it can be
        controlled deterministically.

        Args:
            acting_user_id: Identity performing the deletion
            deleted_at: Deletion timestamp
        """
        self._deleted_at = deleted_at
        self._deleted_by = acting_user_id
        self._touch(acting_user_id)

    def _touch(self, acting_user_id: str) -> None:
        self._updated_at = _utcnow()
        self._updated_by = acting_user_id

    # ============================================================
    # Serialization
    # ============================================================

    def to_primitives(self) -> Dict[str, Any]:
        """Flatten the user into a plain record for transport.

        Raises:
            UnsetFieldError: If the user has not been persisted yet
        """
        return {
            "id": self.id,
            "email": self.email,
            "role": self.role.value,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "full_name": self.full_name,
            "gender": self.gender.value if self.gender is not None else None,
            "created_at": self.created_at,
            "created_by": self.created_by,
            "updated_at": self.updated_at,
            "updated_by": self.updated_by,
            "deleted_at": self.deleted_at,
            "deleted_by": self.deleted_by,
        }

    def __eq__(self, other: object) -> bool:
        """Equality based on id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id!r}, email={self.email!r}, role={self.role.value!r})"
