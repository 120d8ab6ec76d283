#!/usr/bin/env python3
"""Serve the API with uvicorn on the configured host and port."""

import sys

import logfire
import uvicorn

from numtalk.config import Settings
from numtalk.util.observability import configure_logfire

APP_FACTORY = "numtalk.interface.api.app:create_app"


def main() -> int:
    # Raises if AUTH__JWT_SECRET is missing, before anything is served
    settings = Settings()
    configure_logfire(settings)

    logfire.info(
        "Serving {app} on {host}:{port}",
        app=APP_FACTORY,
        host=settings.host,
        port=settings.port,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Server stopped with an error")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
