"""Register use case."""

from pydantic import BaseModel

from empire.application.usecase.profile.views import ProfileItem
from empire.domain.error import ValidationError
from empire.domain.service import AuthService


class RegisterRequest(BaseModel):
    email: str | None = None
    password: str | None = None
    full_name: str | None = None


class RegisterResponse(BaseModel):
    user: ProfileItem


class RegisterUseCase:
    """Use case for creating an email/password account."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Raises:
            ValidationError: Missing or invalid fields, or email taken
        """
        if not request.email or not request.password or not request.full_name:
            raise ValidationError("Email, password and full name are required")

        profile = await self.auth_service.register(
            email=request.email,
            password=request.password,
            full_name=request.full_name,
        )
        return RegisterResponse(user=ProfileItem.from_domain(profile))
