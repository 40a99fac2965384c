"""Login use case."""

from pydantic import BaseModel

from empire.application.usecase.profile.views import ProfileItem
from empire.domain.error import ValidationError
from empire.domain.service import AuthService, JWTService
from empire.domain.service.auth_service import INVALID_CREDENTIALS


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None
    client_ip: str | None = None  # For the failed-attempt log


class LoginResponse(BaseModel):
    """Login response; the route also sets ``token`` as the session cookie."""

    user: ProfileItem
    token: str


class LoginUseCase:
    """Use case for email/password login.

    Steps:
    1. Check credentials (generic error on mismatch)
    2. Refuse banned profiles
    3. Issue the session token
    """

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            ValidationError: Missing or wrong credentials
            ForbiddenError: Banned profile
        """
        if not request.email or not request.password:
            raise ValidationError(INVALID_CREDENTIALS)

        profile = await self.auth_service.authenticate(
            email=request.email,
            password=request.password,
            client_ip=request.client_ip,
        )
        token = self.jwt_service.create_token(str(profile.id), profile.email or "")
        return LoginResponse(user=ProfileItem.from_domain(profile), token=token)
