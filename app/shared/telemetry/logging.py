"""Logging configuration for the API server and the dashboard client."""

import logging
import sys

from app.core.config import get_settings

# Third-party loggers that are too chatty at INFO for a polling dashboard.
_QUIET_LOGGERS = ("httpx", "httpcore")


class RequestIDFilter(logging.Filter):
    """Attach the current request id (or "-") to every record as request_id."""

    def filter(self, record: logging.LogRecord) -> bool:
        from app.middleware.request_id import get_request_id

        record.request_id = get_request_id() or "-"
        return True


def setup_logging(level: int | None = None) -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO, unless an
    explicit level is passed. Output goes to stdout.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        handlers=[handler],
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
