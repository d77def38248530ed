"""Delete user command (soft delete)."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from application.user.queries.find_user import get_active_user
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteUserCommand:
    """Command to soft-delete a user.

    The row is kept with deleted_at/deleted_by set; default queries no
    longer return it and further updates or deletes fail with not found.

    Examples:
        >>> command = DeleteUserCommand(repository)
        >>> user = await command.execute("01HZX...", acting_user_id="admin1")
        >>> user.is_deleted
        True
    """

    repository: IUserRepository

    async def execute(self, user_id: str, acting_user_id: str) -> User:
        """Execute delete user command.

        Args:
            user_id: User identifier
            acting_user_id: Identity performing the deletion

        Returns:
            Soft-deleted user

        Raises:
            UserNotFoundError: If user doesn't exist or was already deleted
        """
        user = await get_active_user(self.repository, user_id)

        user.delete(acting_user_id, datetime.now(timezone.utc))

        deleted = await self.repository.update(user)

        logger.info(
            "User deleted",
            extra={"user_id": user_id, "acting_user_id": acting_user_id},
        )
        return deleted
