"""FastAPI dependencies: repositories, acting user and pagination."""

from dataclasses import dataclass
from typing import Optional

from fastapi import Header, HTTPException, Query, status

from domain.search_condition.core.ports.search_condition_repository import (
    ISearchConditionRepository,
)
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_max_page_size, get_system_user_id
from infrastructure.persistence.factory import (
    get_search_condition_repository,
    get_user_repository,
)


def user_repository() -> IUserRepository:
    return get_user_repository()


def search_condition_repository() -> ISearchConditionRepository:
    return get_search_condition_repository()


def acting_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """Identity performing the request.

    Authentication happens upstream; the caller's id arrives in the
    X-User-Id header. Requests without it are attributed to the system
    user.
    """
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return get_system_user_id()


@dataclass(frozen=True)
class PageParams:
    page: Optional[int]
    page_size: Optional[int]


def page_params(
    page: Optional[int] = Query(None, ge=1),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
) -> PageParams:
    """Validate page/pageSize query parameters.

    Raises:
        HTTPException: 422 if pageSize exceeds MAX_PAGE_SIZE
    """
    max_page_size = get_max_page_size()
    if page_size is not None and page_size > max_page_size:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"pageSize must be <= {max_page_size}",
        )
    return PageParams(page=page, page_size=page_size)
