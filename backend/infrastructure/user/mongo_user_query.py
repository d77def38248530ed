"""Translate a UserPredicate into a MongoDB query document."""

import re
from typing import Any, Dict

from domain.user.core.filters.user_filter import UserPredicate

SEARCHABLE_FIELDS = ("email", "first_name", "last_name")


def to_mongo_query(predicate: UserPredicate) -> Dict[str, Any]:
    """Build the MongoDB filter for a predicate.

    Examples:
        >>> to_mongo_query(UserPredicate())
        {'deleted_at': None}
        >>> to_mongo_query(UserPredicate(include_deleted=True, match_gender=True))
        {'gender': None}
    """
    query: Dict[str, Any] = {}

    if not predicate.include_deleted:
        # Matches both null and missing
        query["deleted_at"] = None

    if predicate.ids is not None:
        query["_id"] = {"$in": sorted(predicate.ids)}

    if predicate.search:
        # User input is a literal substring, not a pattern
        pattern = re.escape(predicate.search)
        query["$or"] = [
            {field: {"$regex": pattern, "$options": "i"}} for field in SEARCHABLE_FIELDS
        ]

    if predicate.role is not None:
        query["role"] = predicate.role.value

    if predicate.match_gender:
        query["gender"] = predicate.gender.value if predicate.gender is not None else None

    return query
