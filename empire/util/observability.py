"""Logfire setup for the storefront API.

Services log through ``logfire`` directly:

    with logfire.span("cart_service.add_item", user_id=str(user_id)):
        ...
        logfire.info("Cart item added", item_id=str(item.id))

Passwords and session tokens pass through the auth routes; Logfire's default
scrubbing already masks attributes named after passwords, cookies and JWTs.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from empire.config import Settings


def _should_send(settings: Settings) -> bool:
    # Explicit flag first, then token presence
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    ``OBSERVABILITY__LOGFIRE_TOKEN`` enables sending to Logfire cloud;
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` overrides that either way. Without a
    token events only go to the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="empire-api",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes: dict) -> dict:
    result = dict(attributes)
    result["method"] = request.method
    result["path"] = request.url.path
    if request.client:
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request with its method, path and client host.

    Headers are not captured: the ``Cookie`` and ``Authorization`` headers
    carry the session token.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements of the async engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
