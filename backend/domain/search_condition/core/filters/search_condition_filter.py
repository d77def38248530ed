"""Search condition filter."""

from dataclasses import dataclass
from typing import Optional, TypedDict

from domain.search_condition.core.entities.search_condition import SearchCondition


class SearchConditionFilter(TypedDict, total=False):
    form_type: str
    include_deleted: bool


@dataclass(frozen=True)
class SearchConditionPredicate:
    """Which stored conditions match a query.

    Attributes:
        include_deleted: When False, soft-deleted conditions never match
        form_type: Restrict to one form (None = all forms)
    """

    include_deleted: bool = False
    form_type: Optional[str] = None

    @staticmethod
    def from_filter(filter: Optional[SearchConditionFilter] = None) -> "SearchConditionPredicate":
        criteria = filter or {}
        return SearchConditionPredicate(
            include_deleted=bool(criteria.get("include_deleted", False)),
            form_type=criteria.get("form_type") or None,
        )

    def matches(self, condition: SearchCondition) -> bool:
        if not self.include_deleted and condition.is_deleted:
            return False
        if self.form_type is not None and condition.form_type != self.form_type:
            return False
        return True
