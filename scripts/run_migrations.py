#!/usr/bin/env python3
"""Apply Alembic migrations to the forum database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c9f2a71   # upgrade to a revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    config = Config("alembic.ini")

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(config, revision)
        except Exception:
            # A broken schema must stop the deploy before the API starts
            logfire.exception("Migration to {revision} failed", revision=revision)
            raise

    logfire.info("Database at {revision}", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
