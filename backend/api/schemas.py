"""Request/response models for the REST API.

JSON bodies use camelCase (firstName, pageSize, createdAt); Python code
uses the snake_case field names.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from application.me.queries.get_me import MeProfile
from application.user.queries.user_list_result import UserListResult
from domain.search_condition.core.entities.search_condition import SearchCondition
from domain.user.core.entities.user import User
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.user_role import UserRole


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----------------- Users -----------------


class UserRequest(CamelModel):
    """Body for POST /users and PUT /users/{id} (full replace)."""

    email: str
    role: UserRole
    first_name: str
    last_name: str
    gender: Optional[Gender] = None


class UserResponse(CamelModel):
    id: str
    email: str
    role: UserRole
    first_name: str
    last_name: str
    full_name: str
    gender: Optional[Gender] = None
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(**user.to_primitives())


class UserListResponse(CamelModel):
    users: List[UserResponse]
    total: int
    page: int
    page_size: int

    @classmethod
    def from_result(cls, result: UserListResult) -> "UserListResponse":
        return cls(
            users=[UserResponse.from_entity(user) for user in result.users],
            total=result.total,
            page=result.page,
            page_size=result.page_size,
        )


# ----------------- Search conditions -----------------


class CreateSearchConditionRequest(CamelModel):
    form_type: str
    name: str
    url_params: str


class UpdateSearchConditionRequest(CamelModel):
    name: str


class SearchConditionResponse(CamelModel):
    id: str
    form_type: str
    name: str
    url_params: str
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[str] = None

    @classmethod
    def from_entity(cls, condition: SearchCondition) -> "SearchConditionResponse":
        return cls(**condition.to_primitives())


# ----------------- Me -----------------


class MeResponse(CamelModel):
    id: str
    name: str
    email: str
    role: UserRole

    @classmethod
    def from_profile(cls, profile: MeProfile) -> "MeResponse":
        return cls(id=profile.id, name=profile.name, email=profile.email, role=profile.role)
