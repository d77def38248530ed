"""UserRole value object."""

from enum import Enum


class UserRole(str, Enum):
    """Access level of a directory user."""

    USER = "user"
    ADMIN = "admin"
