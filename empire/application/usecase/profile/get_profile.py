"""Get own profile use case."""

from uuid import UUID

from pydantic import BaseModel

from empire.domain.service import ProfileService
from empire.domain.value import UserId

from .views import ProfileItem


class GetProfileRequest(BaseModel):
    user_id: str  # From the session


class GetProfileResponse(BaseModel):
    profile: ProfileItem


class GetProfileUseCase:
    """Use case for reading the caller's own profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        profile = await self.profile_service.get_by_id(UserId(UUID(request.user_id)))
        return GetProfileResponse(profile=ProfileItem.from_domain(profile))
