"""Search condition filters."""

from domain.search_condition.core.filters.search_condition_filter import (
    SearchConditionFilter,
    SearchConditionPredicate,
)

__all__ = ["SearchConditionFilter", "SearchConditionPredicate"]
