#!/usr/bin/env python3
"""Upgrade the database to the latest migration."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from estate.config import Settings
from estate.util.logging import setup_logging
from estate.util.observability import configure_logfire


def main() -> int:
    """Run migrations and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", environment=settings.environment)

        alembic_cfg = Config("alembic.ini")
        alembic_cfg.set_main_option(
            "sqlalchemy.url", settings.database_url.replace("%", "%%")
        )
        command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so a deploy never starts against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main())
