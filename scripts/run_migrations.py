#!/usr/bin/env python3
"""Apply database migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from curbside.config import Settings
from curbside.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head unless the in-memory backend is selected."""
    settings = Settings()
    configure_logfire(settings)

    if settings.database.backend == "memory":
        logfire.info("In-memory backend selected, skipping migrations")
        return 0

    try:
        with logfire.span("migrations.upgrade", revision="head"):
            command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy instead of serving against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
