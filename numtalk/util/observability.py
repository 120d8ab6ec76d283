"""Logfire setup and instrumentation hooks.

Services and repositories log through ``logfire`` directly; this module only
decides where telemetry goes and attaches the automatic HTTP and SQL tracing.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from numtalk.config import ObservabilitySettings, Settings

SERVICE_NAME = "numtalk-api"


def _resolve_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit flag wins; otherwise export only when a token is present."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Console output is always enabled. Spans leave the process only when a
    token is configured or ``OBSERVABILITY__SEND_TO_LOGFIRE`` is true.

    Args:
        settings: Application settings
    """
    send_to_logfire = _resolve_send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured for {service}",
        service=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``.

    Headers are left out of the spans because they carry bearer tokens.
    """
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
