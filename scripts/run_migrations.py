#!/usr/bin/env python3
"""Apply database migrations up to head, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import logging
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from civic.config import Settings
from civic.util.logging import setup_logging
from civic.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parents[1] / "alembic.ini"

logger = logging.getLogger(__name__)


def main(argv: list[str]) -> int:
    """Upgrade the schema; any failure aborts with a non-zero exit."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"

    with logfire.span("run_migrations", target=target):
        try:
            alembic_cfg = Config(str(ALEMBIC_INI))
            alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

            logger.info(f"Upgrading database schema to {target}")
            command.upgrade(alembic_cfg, target)
            logfire.info("Database migrations completed", target=target)
            return 0

        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the container rather than start on a broken schema
            raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
