"""REST API endpoint for the current user."""

from fastapi import APIRouter, Depends

from api.deps import acting_user_id, user_repository
from api.schemas import MeResponse
from application.me.queries.get_me import GetMeQuery
from domain.user.core.ports.user_repository import IUserRepository

router = APIRouter(prefix="/me", tags=["me"])


@router.get("", response_model=MeResponse)
async def get_me(
    actor: str = Depends(acting_user_id),
    repository: IUserRepository = Depends(user_repository),
) -> MeResponse:
    profile = await GetMeQuery(repository).execute(actor)
    return MeResponse.from_profile(profile)
