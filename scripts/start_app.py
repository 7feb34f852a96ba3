#!/usr/bin/env python3
"""Start the InspireLens API with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from lens.config import Settings
from lens.util.logging import setup_logging
from lens.util.observability import configure_logfire


def main() -> int:
    """Start the API server and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire before the app module is imported by uvicorn
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting InspireLens API",
            host=settings.api.host,
            port=settings.api.port,
            environment=settings.environment,
        )

        uvicorn.run(
            "lens.interface.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
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
