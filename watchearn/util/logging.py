"""Logging configuration for the application."""

import logging
import sys

from watchearn.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the process.

    Uvicorn, SQLAlchemy and Alembic log through the standard library, so
    the root logger is set up next to Logfire.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("watchearn").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
