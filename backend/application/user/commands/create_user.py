"""Create user command."""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.user_role import UserRole

logger = logging.getLogger(__name__)


@dataclass
class CreateUserCommand:
    """Command to register a new directory user.

    Examples:
        >>> command = CreateUserCommand(repository)
        >>> user = await command.execute(
        ...     email="a@b.com",
        ...     role=UserRole.USER,
        ...     first_name="太郎",
        ...     last_name="山田",
        ...     gender=Gender.MALE,
        ...     acting_user_id="system",
        ... )
        >>> user.created_by
        'system'
    """

    repository: IUserRepository

    async def execute(
        self,
        email: str,
        role: UserRole,
        first_name: str,
        last_name: str,
        gender: Optional[Gender],
        acting_user_id: str,
    ) -> User:
        """Execute create user command.

        Returns:
            Persisted user (id and timestamps assigned)

        Raises:
            ValidationError: If email or name is invalid
            DuplicateEmailError: If the email is already registered
        """
        user = User.create_new(
            email=email,
            role=role,
            first_name=first_name,
            last_name=last_name,
            gender=gender,
            acting_user_id=acting_user_id,
        )

        created = await self.repository.create(user)

        logger.info(
            "User created",
            extra={"user_id": created.id, "acting_user_id": acting_user_id},
        )
        return created
