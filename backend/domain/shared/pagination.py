"""Pagination defaults shared by use cases and repositories."""

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20


def offset(page: int, page_size: int) -> int:
    """Rows to skip for a 1-based page.

    Examples:
        >>> offset(1, 20)
        0
        >>> offset(3, 10)
        20
    """
    return (page - 1) * page_size
