"""User value objects."""

from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.person_name import PersonName
from domain.user.core.value_objects.user_role import UserRole

__all__ = ["Email", "Gender", "PersonName", "UserRole"]
