"""Mapping between User entities and stored records.

Records are flat dicts of primitives shared by the in-memory and MongoDB
adapters. Value objects are re-validated when a record is read back.
"""

from typing import Any, Dict

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.person_name import PersonName
from domain.user.core.value_objects.user_role import UserRole


def to_record(user: User) -> Dict[str, Any]:
    """Mutable fields of a user, without store-assigned id and timestamps."""
    return {
        "email": user.email,
        "role": user.role.value,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "gender": user.gender.value if user.gender is not None else None,
        "created_by": user.created_by,
        "updated_by": user.updated_by,
        "deleted_at": user.deleted_at,
        "deleted_by": user.deleted_by,
    }


def from_record(record: Dict[str, Any]) -> User:
    """Rehydrate a user from a complete stored record (with "id")."""
    gender = record.get("gender")
    return User.reconstruct(
        id=record["id"],
        email=Email.create(record["email"]),
        role=UserRole(record["role"]),
        name=PersonName.create(
            first_name=record["first_name"],
            last_name=record["last_name"],
        ),
        gender=Gender(gender) if gender is not None else None,
        created_at=record["created_at"],
        created_by=record["created_by"],
        updated_at=record["updated_at"],
        updated_by=record["updated_by"],
        deleted_at=record.get("deleted_at"),
        deleted_by=record.get("deleted_by"),
    )
