"""Store-assigned identity and timestamps."""

from datetime import datetime, timezone

from ulid import ULID


def new_id() -> str:
    """Generate a lexicographically sortable identifier (ULID)."""
    return str(ULID())


def to_store_precision(dt: datetime) -> datetime:
    """Truncate to the precision MongoDB keeps (milliseconds)."""
    return dt.replace(microsecond=dt.microsecond - dt.microsecond % 1000)


def store_now() -> datetime:
    """Current UTC time at store precision."""
    return to_store_precision(datetime.now(timezone.utc))
