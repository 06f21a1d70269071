#!/usr/bin/env python3
"""Start the API with Logfire tracking startup errors."""

import sys

import logfire
import uvicorn

from watchearn.config import Settings
from watchearn.util.logging import setup_logging
from watchearn.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure before the app module is imported by uvicorn
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting WatchEarn API", host=settings.host, port=settings.port)
        uvicorn.run(
            "watchearn.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
