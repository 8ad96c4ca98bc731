"""Logfire setup.

Services log through logfire directly:

    logfire.info("Comment created", comment_id=comment.id, post=comment.post)

    with logfire.span("moderation_service.check_rate_limits", ip=ip):
        ...

Everything goes to the console. It is sent to Logfire only when a token is
configured or sending is switched on explicitly.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from meh.config import ObservabilitySettings, Settings

# Health probes would drown out real traffic in the traces
EXCLUDED_URLS = "/health"


def should_send(settings: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, otherwise a configured
    token switches sending on.
    """
    if settings.send_to_logfire is not None:
        return settings.send_to_logfire
    return bool(settings.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start."""
    send = should_send(settings.observability)

    logfire.configure(
        service_name="meh",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token or None,
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
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes.

    Headers are not captured: the Authorization header carries bearer tokens
    and X-Real-IP the visitor's address.
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "method": request.method, "path": request.url.path}
        post = request.query_params.get("post")
        if post:
            result["post"] = post
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=EXCLUDED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements of an engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
