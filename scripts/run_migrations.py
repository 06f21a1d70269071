#!/usr/bin/env python3
"""Apply database migrations with Logfire error tracking."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from watchearn.config import Settings
from watchearn.util.logging import setup_logging
from watchearn.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database to the latest revision."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("run_migrations", environment=settings.environment):
            command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than start on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
