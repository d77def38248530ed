"""Update user command."""

import logging
from dataclasses import dataclass
from typing import Optional

from application.user.queries.find_user import get_active_user
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.user_role import UserRole

logger = logging.getLogger(__name__)


@dataclass
class UpdateUserCommand:
    """Command to replace every editable field of a user.

    Full replace, not a partial patch: all four mutations are applied
    even when a value is unchanged.
    """

    repository: IUserRepository

    async def execute(
        self,
        user_id: str,
        email: str,
        role: UserRole,
        first_name: str,
        last_name: str,
        gender: Optional[Gender],
        acting_user_id: str,
    ) -> User:
        """Execute update user command.

        Returns:
            Persisted user

        Raises:
            UserNotFoundError: If user doesn't exist or was deleted
            ValidationError: If email or name is invalid
            DuplicateEmailError: If the email belongs to another user
        """
        user = await get_active_user(self.repository, user_id)

        user.change_email(email, acting_user_id)
        user.change_role(role, acting_user_id)
        user.change_name(first_name, last_name, acting_user_id)
        user.change_gender(gender, acting_user_id)

        updated = await self.repository.update(user)

        logger.info(
            "User updated",
            extra={"user_id": user_id, "acting_user_id": acting_user_id},
        )
        return updated
