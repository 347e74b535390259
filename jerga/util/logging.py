"""Logging configuration for the application."""

import logging
import sys

from jerga.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure standard library logging.

    Logfire carries structured events; this keeps uvicorn, alembic and
    SQLAlchemy output readable on stdout at a level matching the environment.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("jerga").setLevel(level)

    logging.getLogger(__name__).info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
