"""REST API endpoints for the user directory."""

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.deps import PageParams, acting_user_id, page_params, user_repository
from api.schemas import UserListResponse, UserRequest, UserResponse
from application.user.commands.create_user import CreateUserCommand
from application.user.commands.delete_user import DeleteUserCommand
from application.user.commands.update_user import UpdateUserCommand
from application.user.queries.export_users import ExportUsersQuery
from application.user.queries.find_all_users import FindAllUsersQuery
from application.user.queries.find_user import FindUserQuery
from application.user.queries.search_users import SearchUsersQuery
from domain.user.core.filters.user_filter import UNSET
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.user_role import UserRole
from infrastructure.config import get_default_page_size


router = APIRouter(prefix="/users", tags=["users"])

# Query-string spelling of "users without a gender"
NULL_GENDER = "null"


def parse_gender(gender: Optional[str] = Query(None)) -> Any:
    """Resolve the gender query parameter.

    Absent → UNSET (any gender), "null" → None (genderless users),
    otherwise a Gender value.
    """
    if gender is None:
        return UNSET
    if gender == NULL_GENDER:
        return None
    try:
        return Gender(gender)
    except ValueError:
        allowed = ", ".join([g.value for g in Gender] + [NULL_GENDER])
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"gender must be one of: {allowed}",
        )


@router.get("", response_model=UserListResponse)
async def list_users(
    pages: PageParams = Depends(page_params),
    repository: IUserRepository = Depends(user_repository),
) -> UserListResponse:
    query = FindAllUsersQuery(repository, default_page_size=get_default_page_size())
    result = await query.execute(page=pages.page, page_size=pages.page_size)
    return UserListResponse.from_result(result)


@router.get("/search/detail", response_model=UserListResponse)
async def search_users(
    id: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    role: Optional[UserRole] = Query(None),
    gender: Any = Depends(parse_gender),
    pages: PageParams = Depends(page_params),
    repository: IUserRepository = Depends(user_repository),
) -> UserListResponse:
    query = SearchUsersQuery(repository, default_page_size=get_default_page_size())
    result = await query.execute(
        id=id,
        search=search,
        role=role,
        gender=gender,
        page=pages.page,
        page_size=pages.page_size,
    )
    return UserListResponse.from_result(result)


@router.get("/export", response_model=List[UserResponse])
async def export_users(
    id: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    role: Optional[UserRole] = Query(None),
    gender: Any = Depends(parse_gender),
    repository: IUserRepository = Depends(user_repository),
) -> List[UserResponse]:
    users = await ExportUsersQuery(repository).execute(
        id=id, search=search, role=role, gender=gender
    )
    return [UserResponse.from_entity(user) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    repository: IUserRepository = Depends(user_repository),
) -> UserResponse:
    user = await FindUserQuery(repository).execute(user_id)
    return UserResponse.from_entity(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserRequest,
    actor: str = Depends(acting_user_id),
    repository: IUserRepository = Depends(user_repository),
) -> UserResponse:
    user = await CreateUserCommand(repository).execute(
        email=body.email,
        role=body.role,
        first_name=body.first_name,
        last_name=body.last_name,
        gender=body.gender,
        acting_user_id=actor,
    )
    return UserResponse.from_entity(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UserRequest,
    actor: str = Depends(acting_user_id),
    repository: IUserRepository = Depends(user_repository),
) -> UserResponse:
    user = await UpdateUserCommand(repository).execute(
        user_id=user_id,
        email=body.email,
        role=body.role,
        first_name=body.first_name,
        last_name=body.last_name,
        gender=body.gender,
        acting_user_id=actor,
    )
    return UserResponse.from_entity(user)


@router.delete("/{user_id}", response_model=UserResponse)
async def delete_user(
    user_id: str,
    actor: str = Depends(acting_user_id),
    repository: IUserRepository = Depends(user_repository),
) -> UserResponse:
    user = await DeleteUserCommand(repository).execute(user_id, acting_user_id=actor)
    return UserResponse.from_entity(user)
