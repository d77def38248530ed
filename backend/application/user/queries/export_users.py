"""Export users query - every matching user, no pagination."""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from domain.user.core.entities.user import User
from domain.user.core.filters.user_filter import UNSET, build_user_filter_without_pagination
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_role import UserRole

logger = logging.getLogger(__name__)


@dataclass
class ExportUsersQuery:
    """Query: all active users matching the filter, for download.

    With no parameters the repository receives no filter at all, which
    returns the same rows as an unfiltered, unpaginated find_all.
    """

    repository: IUserRepository

    async def execute(
        self,
        id: Optional[str] = None,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
        gender: Any = UNSET,
    ) -> List[User]:
        filter = build_user_filter_without_pagination(
            id=id, search=search, role=role, gender=gender
        )
        users = await self.repository.find_all(filter)

        logger.info(
            "Users exported",
            extra={"filtered": filter is not None, "count": len(users)},
        )
        return users
