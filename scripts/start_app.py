#!/usr/bin/env python3
"""Serve the API with uvicorn, logging startup failures to Logfire."""

import sys

import logfire
import uvicorn

from civic.config import Settings
from civic.util.logging import setup_logging
from civic.util.observability import configure_logfire


def main() -> int:
    """Configure logging and telemetry, then hand over to uvicorn."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire before the app module is imported
    configure_logfire(settings)

    try:
        settings.check_deployable()
        logfire.info(
            "Starting civic check API",
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "civic.interface.api.app:app",
            host="0.0.0.0",
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
