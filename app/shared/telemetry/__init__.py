"""Logging and tracing used by the API, the use cases and the client scripts."""

from app.shared.telemetry.logging import RequestIDFilter, setup_logging
from app.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry
from app.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "RequestIDFilter",
    "TelemetryConfig",
    "add_span_attributes",
    "get_telemetry",
    "set_telemetry",
    "setup_logging",
    "traced",
]
