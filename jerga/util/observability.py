"""Logfire setup for the Jerga API.

Services log through logfire directly, with one span per operation:

    with logfire.span("vote_service.cast_vote", user_id=user_id):
        ...
        logfire.info("Vote recorded", action=transition.action.value)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from jerga.config import Settings

# Attribute names whose values Logfire must redact
SCRUBBED_FIELDS = ["auth_token", "authorization", "webhook_secret", "jwt_secret"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Events go to the Logfire cloud only when a token is configured or
    OBSERVABILITY__SEND_TO_LOGFIRE is set explicitly; otherwise they stay
    on the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    config_kwargs = {
        "service_name": "jerga-backend",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "scrubbing": logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        config_kwargs["token"] = observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    logfire.instrument_fastapi(
        app,
        # Cookies carry the session token
        capture_headers=False,
        excluded_urls="/health",
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
