#!/usr/bin/env python3
"""Upgrade the database schema, reporting failures to Logfire.

Usage: run_migrations.py [REVISION]   (defaults to "head")
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from meh.config import Settings
from meh.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    configure_logfire(Settings())
    revision = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app container must not start on a broken schema
            raise

    logfire.info("Database at revision", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
