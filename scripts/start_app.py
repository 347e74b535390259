#!/usr/bin/env python3
"""Serve the Jerga API with uvicorn."""

import sys

import logfire
import uvicorn

from jerga.config import Settings
from jerga.util.observability import configure_logfire


def main() -> int:
    """Configure Logfire, then hand over to uvicorn."""
    settings = Settings()

    # Before the app import so container and route setup errors are captured
    configure_logfire(settings)

    local = settings.environment in ("test", "development")
    logfire.info(
        "Starting Jerga API",
        environment=settings.environment,
        port=settings.port,
        git_sha=settings.git_sha,
    )

    try:
        # uvicorn imports the app module, which builds the DI container
        uvicorn.run(
            "jerga.interface.api.app:app",
            host="127.0.0.1" if local else "0.0.0.0",
            port=settings.port,
            reload=local and settings.debug,
            proxy_headers=not local,
            forwarded_allow_ips=None if local else "*",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
