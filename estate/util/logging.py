"""Stdlib logging setup for third-party libraries and scripts.

Application code logs through logfire; this only gives uvicorn, alembic and
the helper scripts a sensible format and level.
"""

import logging
import sys

from estate.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

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

    # Chatty libraries stay at WARNING
    for name in ("httpx", "httpcore", "multipart", "PIL"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("estate").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for ``__name__``)."""
    return logging.getLogger(name)
