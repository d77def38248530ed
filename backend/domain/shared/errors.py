"""Domain exceptions shared by the user and search condition contexts.

All domain exceptions inherit from DomainError so the HTTP boundary can
map them to status codes in one place.
"""

from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class ValidationError(DomainError):
    """A value failed domain validation before any store access."""

    def __init__(self, field: str, message: str):
        """Initialize with the offending field.

        Args:
            field: Name of the field that failed validation
            message: Human readable description
        """
        self.field = field
        super().__init__(message)


class RequiredFieldError(ValidationError):
    """A required field was missing or blank after trimming."""

    def __init__(self, field: str):
        super().__init__(field, f"{field} is required")


class InvalidFormatError(ValidationError):
    """A field was present but not in the expected shape."""

    def __init__(self, field: str):
        super().__init__(field, f"{field} has an invalid format")


class NotFoundError(DomainError):
    """Resource does not exist or has been soft-deleted."""

    def __init__(self, resource: str, identifier: str):
        """Initialize with resource kind and identifier.

        Args:
            resource: Resource kind (e.g. "user", "search condition")
            identifier: Identifier that was looked up
        """
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """A uniqueness constraint was violated by the store."""

    def __init__(self, resource: str, identifier: str, message: Optional[str] = None):
        """Initialize with resource kind, identifier and user-facing message.

        Args:
            resource: Resource kind (e.g. "user")
            identifier: Conflicting value or id
            message: Message to surface to the caller
        """
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} already exists: {identifier}")


class UnsetFieldError(DomainError, RuntimeError):
    """A store-assigned field was read before the entity was persisted.

    Signals a programming error: correct use-case code never serializes
    an entity that has not completed a repository round-trip.
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is not set")
