#!/usr/bin/env python3
"""Apply database migrations up to head."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from lens.config import Settings
from lens.util.logging import get_logger, setup_logging
from lens.util.observability import configure_logfire

logger = get_logger(__name__)


def main() -> int:
    """Run migrations and report failures to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    # The URL always comes from settings, never from alembic.ini
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

    try:
        logger.info("Upgrading database schema to head")
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
        # Fail the deploy rather than start against a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
