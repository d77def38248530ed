"""Search users query - filtered, paginated listing."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional

from application.user.queries.user_list_result import UserListResult
from domain.shared.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from domain.user.core.filters.user_filter import UNSET, UserFilter, build_user_filter
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_role import UserRole

logger = logging.getLogger(__name__)


async def fetch_page(repository: IUserRepository, filter: UserFilter) -> UserListResult:
    """Run find_all and count concurrently for one filter.

    The filter must carry the resolved page and page_size.
    """
    users, total = await asyncio.gather(
        repository.find_all(filter),
        repository.count(filter),
    )
    return UserListResult(
        users=users,
        total=total,
        page=filter["page"],
        page_size=filter["page_size"],
    )


@dataclass
class SearchUsersQuery:
    """Query: users matching any subset of id/search/role/gender.

    Unsupplied parameters leave the corresponding field unconstrained.
    gender=None (as opposed to leaving it UNSET) selects users without a
    gender.

    Examples:
        >>> query = SearchUsersQuery(repository)
        >>> result = await query.execute(search="yamada", role=UserRole.ADMIN)
        >>> result.total
        3
    """

    repository: IUserRepository
    default_page_size: int = DEFAULT_PAGE_SIZE

    async def execute(
        self,
        id: Optional[str] = None,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        gender: Any = UNSET,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> UserListResult:
        """Execute search.

        Args:
            id: Comma/whitespace separated ids
            search: Free-text term over email, first and last name
            role: Exact role
            gender: Exact gender, None for genderless, UNSET for any
            page: 1-based page (default 1)
            page_size: Rows per page (default configured page size)

        Returns:
            UserListResult
        """
        filter = build_user_filter(
            id=id,
            search=search,
            role=role,
            gender=gender,
            page=page if page is not None else DEFAULT_PAGE,
            page_size=page_size if page_size is not None else self.default_page_size,
        )
        result = await fetch_page(self.repository, filter)

        logger.info(
            "Users searched",
            extra={
                "filter_keys": sorted(filter.keys()),
                "total": result.total,
                "returned": len(result.users),
                "page": result.page,
            },
        )
        return result
