#!/usr/bin/env python3
"""Serve the forum API with uvicorn."""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Before the app module is imported, so startup failures are traced
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Serving forum API on port {port}",
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "forum.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=settings.environment != "development",
        )
    except Exception:
        logfire.exception("Forum API failed to start")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
