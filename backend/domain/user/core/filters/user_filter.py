"""User search filter and predicate builder.

A UserFilter is a loosely specified search request whose semantics depend
on which keys are present, not only on their values: {"gender": None}
asks for genderless users while a filter without a "gender" key leaves
gender unconstrained.

UserFilterBuilder turns a filter into a UserPredicate, a structured
description of which stored users match. Persistence adapters either
evaluate it directly (in-memory) or translate it into their own query
language (MongoDB). Pagination keys travel in the same filter but are
resolved by the repositories.
"""

import re
from dataclasses import dataclass
from typing import Any, FrozenSet, Optional, TypedDict

from domain.user.core.entities.user import User
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.user_role import UserRole


class UserFilter(TypedDict, total=False):
    """Filter bag accepted by user repositories.

    Keys:
        id: Comma/whitespace separated list of user ids
        search: Free-text term matched against email, first and last name
        role: Exact role
        gender: Exact gender, None meaning "no gender"
        page: 1-based page number
        page_size: Rows per page
        include_deleted: Include soft-deleted users
    """

    id: str
    search: str
    role: UserRole
    gender: Optional[Gender]
    page: int
    page_size: int
    include_deleted: bool


class _Unset:
    """Marker for a search parameter the caller did not supply."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

_ID_SEPARATORS = re.compile(r"[,\s]+")


def split_ids(raw: Optional[str]) -> FrozenSet[str]:
    """Split a comma/whitespace separated id list, dropping empty tokens.

    Examples:
        >>> sorted(split_ids("a, b  c"))
        ['a', 'b', 'c']
        >>> split_ids("  ,, ")
        frozenset()
    """
    if not raw:
        return frozenset()
    return frozenset(token for token in _ID_SEPARATORS.split(raw) if token)


@dataclass(frozen=True)
class UserPredicate:
    """Structured description of which users satisfy a query.

    Attributes:
        include_deleted: When False, soft-deleted users never match
        ids: Restrict to these ids (None = no id constraint)
        search: Case-insensitive "contains" over email, first and last name
        role: Exact role (None = any role)
        match_gender: Whether gender is constrained at all
        gender: Required gender when match_gender is True (None = genderless)
    """

    include_deleted: bool = False
    ids: Optional[FrozenSet[str]] = None
    search: Optional[str] = None
    role: Optional[UserRole] = None
    match_gender: bool = False
    gender: Optional[Gender] = None

    def matches(self, user: User) -> bool:
        """Evaluate the predicate against a persisted user."""
        if not self.include_deleted and user.is_deleted:
            return False

        if self.ids is not None and user.id not in self.ids:
            return False

        if self.search:
            term = self.search.lower()
            fields = (user.email, user.first_name, user.last_name)
            if not any(term in value.lower() for value in fields):
                return False

        if self.role is not None and user.role != self.role:
            return False

        if self.match_gender and user.gender != self.gender:
            return False

        return True


class UserFilterBuilder:
    """Builds UserPredicate instances from UserFilter bags."""

    @staticmethod
    def build(filter: Optional[UserFilter] = None) -> UserPredicate:
        """Translate a filter bag into a predicate.

        Pure function: the input is never mutated and every call returns
        a fresh predicate.

        Args:
            filter: Filter bag (None behaves like an empty filter)

        Returns:
            UserPredicate

        Examples:
            >>> UserFilterBuilder.build().include_deleted
            False
            >>> UserFilterBuilder.build({"gender": None}).match_gender
            True
            >>> UserFilterBuilder.build({}).match_gender
            False
        """
        criteria = filter or {}

        ids = split_ids(criteria.get("id"))
        role = criteria.get("role")

        return UserPredicate(
            include_deleted=bool(criteria.get("include_deleted", False)),
            ids=ids or None,
            search=criteria.get("search") or None,
            role=UserRole(role) if role is not None else None,
            match_gender="gender" in criteria,
            gender=_coerce_gender(criteria.get("gender")),
        )


def _coerce_gender(value: Optional[Any]) -> Optional[Gender]:
    return Gender(value) if value is not None else None


def build_user_filter(
    id: Optional[str] = None,
    search: Optional[str] = None,
    role: Optional[UserRole] = None,
    gender: Any = UNSET,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> UserFilter:
    """Build a filter bag from whichever search parameters were supplied.

    Unsupplied parameters are omitted so that repository defaults apply.
    Pass gender=None to ask for genderless users; leave it UNSET to
    leave gender unconstrained.
    """
    filter: UserFilter = {}
    if id:
        filter["id"] = id
    if search:
        filter["search"] = search
    if role is not None:
        filter["role"] = role
    if gender is not UNSET:
        filter["gender"] = gender
    if page is not None:
        filter["page"] = page
    if page_size is not None:
        filter["page_size"] = page_size
    return filter


def build_user_filter_without_pagination(
    id: Optional[str] = None,
    search: Optional[str] = None,
    role: Optional[UserRole] = None,
    gender: Any = UNSET,
) -> Optional[UserFilter]:
    """Same as build_user_filter without pagination.

    Returns None when no parameter was supplied, meaning "everything".
    """
    filter = build_user_filter(id=id, search=search, role=role, gender=gender)
    return filter or None
