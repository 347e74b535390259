#!/usr/bin/env python3
"""Apply Jerga's schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a revision
    python scripts/run_migrations.py -1         # step back (or "base" to drop all)
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from jerga.config import Settings
from jerga.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Move the schema to the requested revision, logging failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    # env.py reads the database URL from Settings
    alembic_cfg = Config("alembic.ini")

    with logfire.span(
        "migrations.run", target=target, environment=settings.environment
    ):
        try:
            if target == "base" or target.startswith("-"):
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
