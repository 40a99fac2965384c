"""Update user use case (admin moderation)."""

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_enum, parse_uuid
from empire.domain.service import ProfileService
from empire.domain.value import ProfileStatus, Role, UserId

from .views import ProfileItem


class UpdateUserRequest(BaseModel):
    user_id: str
    role: str | None = None
    status: str | None = None


class UpdateUserResponse(BaseModel):
    profile: ProfileItem


class UpdateUserUseCase:
    """Use case for changing another user's role or status."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: UpdateUserRequest) -> UpdateUserResponse:
        """Execute update user flow.

        Raises:
            ValidationError: Neither field given, or invalid values
            NotFoundError: Profile does not exist
        """
        user_id = UserId(parse_uuid(request.user_id, "user id"))
        role = parse_enum(Role, request.role, "role") if request.role else None
        status = (
            parse_enum(ProfileStatus, request.status, "status")
            if request.status
            else None
        )

        profile = await self.profile_service.admin_update(
            user_id, role=role, status=status
        )
        return UpdateUserResponse(profile=ProfileItem.from_domain(profile))
