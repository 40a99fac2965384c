"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

from empire.application.usecase.auth import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from empire.config import Settings
from empire.interface.api.guards import AUTH_COOKIE

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """Registration payload; fields are checked by the use case."""

    email: str | None = None
    password: str | None = None
    full_name: str | None = None


class LoginAPIRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an email/password account.

    Returns:
        The new user's profile
    """
    return await register_use_case.execute(
        RegisterRequest(
            email=request.email,
            password=request.password,
            full_name=request.full_name,
        )
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    http_request: Request,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Check credentials and start a session.

    The token is returned in the body and set as an HTTP-only cookie.
    """
    result = await login_use_case.execute(
        LoginRequest(
            email=request.email,
            password=request.password,
            client_ip=http_request.client.host if http_request.client else None,
        )
    )

    response.set_cookie(
        key=AUTH_COOKIE,
        value=result.token,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite=settings.auth.cookie_samesite,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    logfire.info("Auth cookie set", user_id=result.user.id)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    # Same path as when it was created
    response.delete_cookie(key=AUTH_COOKIE, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")
