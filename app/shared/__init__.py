"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, infrastructure and client. No business logic.
"""

from app.shared.utils import (
    ensure_utc,
    format_short_date,
    generate_cuid,
    parse_iso_utc,
    utc_now,
)

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_iso_utc",
    "format_short_date",
]
