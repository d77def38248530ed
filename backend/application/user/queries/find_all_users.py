"""Find all users query - unfiltered, paginated listing."""

import logging
from dataclasses import dataclass
from typing import Optional

from application.user.queries.search_users import fetch_page
from application.user.queries.user_list_result import UserListResult
from domain.shared.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from domain.user.core.filters.user_filter import build_user_filter
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class FindAllUsersQuery:
    """Query: one page of active users, newest first."""

    repository: IUserRepository
    default_page_size: int = DEFAULT_PAGE_SIZE

    async def execute(
        self, page: Optional[int] = None, page_size: Optional[int] = None
    ) -> UserListResult:
        filter = build_user_filter(
            page=page if page is not None else DEFAULT_PAGE,
            page_size=page_size if page_size is not None else self.default_page_size,
        )
        result = await fetch_page(self.repository, filter)

        logger.info(
            "Users listed",
            extra={"total": result.total, "page": result.page, "page_size": result.page_size},
        )
        return result
