"""PersonName value object."""

from dataclasses import dataclass

from domain.shared.errors import RequiredFieldError


@dataclass(frozen=True)
class PersonName:
    """First/last name pair.

    Both parts are trimmed and must be non-empty.
    Full name follows the family-name-first convention.

    Examples:
        >>> name = PersonName.create(first_name="太郎", last_name="山田")
        >>> name.full_name
        '山田 太郎'
    """

    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        """Trim and validate both parts."""
        first = (self.first_name or "").strip()
        last = (self.last_name or "").strip()

        if not first or not last:
            raise RequiredFieldError("first/last name")

        object.__setattr__(self, "first_name", first)
        object.__setattr__(self, "last_name", last)

    @staticmethod
    def create(first_name: str, last_name: str) -> "PersonName":
        """Build a PersonName from raw input."""
        return PersonName(first_name=first_name, last_name=last_name)

    @property
    def full_name(self) -> str:
        """Family name, a space, then given name."""
        return f"{self.last_name} {self.first_name}"

    def __str__(self) -> str:
        return self.full_name
