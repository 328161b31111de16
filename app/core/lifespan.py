"""Startup and shutdown for the dashboard API.

Startup: logging, then tracing (when enabled) with the FastAPI app and the
SQL engine instrumented. Shutdown: flush spans, then dispose the engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.infrastructure.persistence import database
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


def _start_tracing(app: FastAPI, settings: Settings) -> None:
    telemetry = TelemetryConfig.from_settings(settings)
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    telemetry.instrument_fastapi(app)
    database._ensure_engine()
    if database.engine is not None:
        telemetry.instrument_sqlalchemy(database.engine)
    set_telemetry(telemetry)


def _stop_tracing() -> None:
    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging()
    if settings.telemetry_enabled:
        _start_tracing(app, settings)
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    _stop_tracing()
    await database.dispose_engine()
    logger.info("%s stopped", settings.app_name)
