"""Paginated user list result."""

from dataclasses import dataclass
from typing import List

from domain.user.core.entities.user import User


@dataclass(frozen=True)
class UserListResult:
    """One page of users plus pagination metadata.

    Attributes:
        users: Users on this page, newest first
        total: Number of users matching the filter across all pages
        page: 1-based page number
        page_size: Rows per page
    """

    users: List[User]
    total: int
    page: int
    page_size: int
