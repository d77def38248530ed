"""REST API endpoints for saved search conditions."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from api.deps import acting_user_id, search_condition_repository
from api.schemas import (
    CreateSearchConditionRequest,
    SearchConditionResponse,
    UpdateSearchConditionRequest,
)
from application.search_condition.commands.create_search_condition import (
    CreateSearchConditionCommand,
)
from application.search_condition.commands.delete_search_condition import (
    DeleteSearchConditionCommand,
)
from application.search_condition.commands.update_search_condition import (
    UpdateSearchConditionCommand,
)
from application.search_condition.queries.find_all_search_conditions import (
    FindAllSearchConditionsQuery,
)
from domain.search_condition.core.ports.search_condition_repository import (
    ISearchConditionRepository,
)

router = APIRouter(prefix="/search-conditions", tags=["search-conditions"])


@router.get("", response_model=List[SearchConditionResponse])
async def list_search_conditions(
    form_type: Optional[str] = Query(None, alias="formType"),
    repository: ISearchConditionRepository = Depends(search_condition_repository),
) -> List[SearchConditionResponse]:
    conditions = await FindAllSearchConditionsQuery(repository).execute(form_type=form_type)
    return [SearchConditionResponse.from_entity(condition) for condition in conditions]


@router.post("", response_model=SearchConditionResponse, status_code=status.HTTP_201_CREATED)
async def create_search_condition(
    body: CreateSearchConditionRequest,
    actor: str = Depends(acting_user_id),
    repository: ISearchConditionRepository = Depends(search_condition_repository),
) -> SearchConditionResponse:
    condition = await CreateSearchConditionCommand(repository).execute(
        form_type=body.form_type,
        name=body.name,
        url_params=body.url_params,
        acting_user_id=actor,
    )
    return SearchConditionResponse.from_entity(condition)


@router.put("/{condition_id}", response_model=SearchConditionResponse)
async def rename_search_condition(
    condition_id: str,
    body: UpdateSearchConditionRequest,
    actor: str = Depends(acting_user_id),
    repository: ISearchConditionRepository = Depends(search_condition_repository),
) -> SearchConditionResponse:
    condition = await UpdateSearchConditionCommand(repository).execute(
        condition_id=condition_id, name=body.name, acting_user_id=actor
    )
    return SearchConditionResponse.from_entity(condition)


@router.delete("/{condition_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_search_condition(
    condition_id: str,
    actor: str = Depends(acting_user_id),
    repository: ISearchConditionRepository = Depends(search_condition_repository),
) -> Response:
    await DeleteSearchConditionCommand(repository).execute(condition_id, acting_user_id=actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
