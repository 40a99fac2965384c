"""Update own profile use case."""

from uuid import UUID

from pydantic import BaseModel

from empire.domain.service import ProfileService
from empire.domain.value import UserId

from .views import ProfileItem


class UpdateProfileRequest(BaseModel):
    """Update profile request; omitted fields are left unchanged."""

    user_id: str  # From the session
    full_name: str | None = None
    avatar: str | None = None


class UpdateProfileResponse(BaseModel):
    profile: ProfileItem


class UpdateProfileUseCase:
    """Use case for editing the caller's display name and avatar."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            ValidationError: Name length or avatar URL invalid
        """
        profile = await self.profile_service.update_own(
            user_id=UserId(UUID(request.user_id)),
            full_name=request.full_name,
            avatar=request.avatar,
        )
        return UpdateProfileResponse(profile=ProfileItem.from_domain(profile))
