"""Mapping between SearchCondition entities and stored records."""

from typing import Any, Dict

from domain.search_condition.core.entities.search_condition import SearchCondition


def to_record(condition: SearchCondition) -> Dict[str, Any]:
    """Mutable fields of a condition, without store-assigned id and timestamps."""
    return {
        "form_type": condition.form_type,
        "name": condition.name,
        "url_params": condition.url_params,
        "created_by": condition.created_by,
        "updated_by": condition.updated_by,
        "deleted_at": condition.deleted_at,
        "deleted_by": condition.deleted_by,
    }


def from_record(record: Dict[str, Any]) -> SearchCondition:
    return SearchCondition.reconstruct(
        id=record["id"],
        form_type=record["form_type"],
        name=record["name"],
        url_params=record.get("url_params") or "",
        created_at=record["created_at"],
        created_by=record["created_by"],
        updated_at=record["updated_at"],
        updated_by=record["updated_by"],
        deleted_at=record.get("deleted_at"),
        deleted_by=record.get("deleted_by"),
    )
