"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings come from settings so the
dashboard poll rate can be tuned per deployment.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def dashboard_read_limit() -> str:
    """Limit string for the dashboard read endpoint (resolved per request)."""
    return get_settings().dashboard_rate_limit


limit_dashboard_reads = limiter.limit(dashboard_read_limit)
