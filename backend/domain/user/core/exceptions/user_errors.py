"""User domain exceptions."""

from domain.shared.errors import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """User does not exist or has been soft-deleted."""

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User ID that was looked up
        """
        super().__init__("user", identifier)


class DuplicateEmailError(ConflictError):
    """Email address already belongs to another stored user."""

    MESSAGE = "This email address is already registered"

    def __init__(self, identifier: str):
        """Initialize with the conflicting value.

        Args:
            identifier: Email or user ID involved in the write
        """
        super().__init__("user", identifier, self.MESSAGE)
