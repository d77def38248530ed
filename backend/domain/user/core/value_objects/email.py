"""Email value object."""

from dataclasses import dataclass

from domain.shared.errors import InvalidFormatError, RequiredFieldError


@dataclass(frozen=True)
class Email:
    """Email address value object.

    Normalized to trimmed lowercase on construction.
    Equality is by normalized value.

    Examples:
        >>> Email.create("  Foo@Bar.com ").value
        'foo@bar.com'

        >>> Email.create("foo@bar.com") == Email.create("FOO@bar.com")
        True

    Raises:
        RequiredFieldError: If the value is empty after trimming
        InvalidFormatError: If the value contains no "@"
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the address."""
        trimmed = (self.value or "").strip()

        if not trimmed:
            raise RequiredFieldError("email")

        if "@" not in trimmed:
            raise InvalidFormatError("email")

        # frozen dataclass: normalize in place before the instance escapes
        object.__setattr__(self, "value", trimmed.lower())

    @staticmethod
    def create(raw: str) -> "Email":
        """Build an Email from raw user input.

        Args:
            raw: Address as typed by the user

        Returns:
            Normalized Email
        """
        return Email(raw)

    def __str__(self) -> str:
        return self.value
