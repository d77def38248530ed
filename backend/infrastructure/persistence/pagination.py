"""Pagination resolution shared by repository adapters.

Filter bags carry page/page_size next to the search keys. Adapters turn
them into skip/limit here, and only when the caller supplied at least
one of the two: a filter without either means "every match" (export).
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from domain.shared.pagination import DEFAULT_PAGE, offset
from infrastructure.config import get_default_page_size


@dataclass(frozen=True)
class PageWindow:
    skip: int
    limit: int


def resolve_page_window(filter: Optional[Mapping[str, Any]]) -> Optional[PageWindow]:
    """Resolve skip/limit from a filter bag.

    Args:
        filter: Filter bag, possibly None

    Returns:
        PageWindow, or None when no pagination was requested
    """
    if not filter:
        return None

    page = filter.get("page")
    page_size = filter.get("page_size")
    if page is None and page_size is None:
        return None

    page = page or DEFAULT_PAGE
    page_size = page_size or get_default_page_size()
    return PageWindow(skip=offset(page, page_size), limit=page_size)
