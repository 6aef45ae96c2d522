"""Logfire setup and instrumentation for Nexus.

Services open spans around store and provider calls and emit events:

    with logfire.span("connection_service.redeem_invite", invitee_id=...):
        logfire.info("Invite redemption finished", outcome=result.outcome.value)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from nexus.config import Settings

SERVICE_NAME = "nexus-backend"


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``OBSERVABILITY__SEND_TO_LOGFIRE`` wins; otherwise telemetry
    is sent only when a token is configured.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start, before the app is built."""
    send = should_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="show-parents", verbose=settings.debug
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request by method and path.

    Headers are not captured since the session cookie travels in them.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=lambda request, attributes: {
            **attributes,
            "method": request.method,
            "path": request.url.path,
        },
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued by the repositories."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace calls to the identity provider, Anthropic and fetched pages."""
    logfire.instrument_httpx()
