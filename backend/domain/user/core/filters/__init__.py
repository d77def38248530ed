"""User search filters."""

from domain.user.core.filters.user_filter import (
    UNSET,
    UserFilter,
    UserFilterBuilder,
    UserPredicate,
    build_user_filter,
    build_user_filter_without_pagination,
    split_ids,
)

__all__ = [
    "UNSET",
    "UserFilter",
    "UserFilterBuilder",
    "UserPredicate",
    "build_user_filter",
    "build_user_filter_without_pagination",
    "split_ids",
]
