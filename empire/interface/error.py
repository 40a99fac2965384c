"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from empire.config import Settings
from empire.domain.error import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown subclasses are client errors."""
    for error_cls, code in STATUS_BY_ERROR.items():
        if isinstance(error, error_cls):
            return code
    return status.HTTP_400_BAD_REQUEST


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Answer every failure as ``{"detail": message}``.

    Args:
        app: FastAPI application
        settings: Application settings (``debug`` exposes 500 messages)
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        code = status_for(exc)
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status=code,
            error=str(exc),
        )
        return JSONResponse(status_code=code, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unexpected error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        detail = str(exc) if settings.debug else INTERNAL_ERROR_MESSAGE
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": detail},
        )
