#!/usr/bin/env python3
"""Start the admin API with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from estate.config import Settings
from estate.util.logging import setup_logging
from estate.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        logfire.info("Starting estate admin API")

        uvicorn.run(
            "estate.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=8000,
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
