"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.user.core.entities.user import User
from domain.user.core.filters.user_filter import UserFilter


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations.
    Implementations convert between stored rows and User entities and
    resolve pagination from the filter bag.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserRepository(IUserRepository):
        ...     async def create(self, user: User) -> User:
        ...         # Insert into MongoDB
        ...         pass
    """

    @abstractmethod
    async def find_all(self, filter: Optional[UserFilter] = None) -> List[User]:
        """Find users matching filter, newest first.

        Args:
            filter: Filter bag. Skip/limit apply only when page or
                page_size is present; otherwise every match is returned.

        Returns:
            Matching users ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count(self, filter: Optional[UserFilter] = None) -> int:
        """Count users matching filter, ignoring pagination.

        Uses the same predicate as find_all so that totals and pages agree.
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by id.

        Args:
            user_id: User identifier

        Returns:
            User if stored (soft-deleted included), None otherwise

        Note:
            Absence is not an error; callers decide.
        """
        pass

    @abstractmethod
    async def create(self, user: User, user_id: Optional[str] = None) -> User:
        """Persist a new user.

        Assigns id, created_at and updated_at during the round-trip.

        Args:
            user: User built with User.create_new()
            user_id: Fixed id instead of a generated one (seeding only)

        Returns:
            Persisted user

        Raises:
            ConflictError: If the email (or the fixed id) is already taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist every mutable field of an existing user.

        Soft-delete fields included.

        Raises:
            ConflictError: If the new email is already registered
            UnsetFieldError: If the user has no id
        """
        pass
