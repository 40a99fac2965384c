"""Own profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from empire.application.usecase.profile import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from empire.domain.service import AccessPolicy
from empire.interface.api.guards import require_user, session_token

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """Profile edits; omitted fields stay unchanged, blank avatar clears it."""

    full_name: str | None = None
    avatar: str | None = None


@router.get("", response_model=GetProfileResponse)
async def get_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> GetProfileResponse:
    """Get the caller's profile."""
    user_id = require_user(access_policy, token)
    return await get_profile_use_case.execute(GetProfileRequest(user_id=str(user_id)))


@router.put("", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> UpdateProfileResponse:
    """Update the caller's display name and avatar."""
    user_id = require_user(access_policy, token)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=str(user_id),
            full_name=request.full_name,
            avatar=request.avatar,
        )
    )
