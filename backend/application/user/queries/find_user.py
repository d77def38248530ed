"""Find user query."""

import logging
from dataclasses import dataclass

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import UserNotFoundError
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


async def get_active_user(repository: IUserRepository, user_id: str) -> User:
    """Load a user that exists and is not soft-deleted.

    Raises:
        UserNotFoundError: If absent or soft-deleted
    """
    user = await repository.find_by_id(user_id)
    if user is None or user.is_deleted:
        raise UserNotFoundError(user_id)
    return user


@dataclass
class FindUserQuery:
    """Query to get one active user by id.

    Examples:
        >>> query = FindUserQuery(repository)
        >>> user = await query.execute("01HZX...")
    """

    repository: IUserRepository

    async def execute(self, user_id: str) -> User:
        """Execute find user query.

        Args:
            user_id: User identifier

        Returns:
            User entity

        Raises:
            UserNotFoundError: If user doesn't exist or was deleted
        """
        user = await get_active_user(self.repository, user_id)
        logger.info("User found", extra={"user_id": user_id})
        return user
