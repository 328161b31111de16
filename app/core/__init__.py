"""Core: config, rate limiting, lifespan and exception handlers.

Single place for settings and application bootstrap.
"""

from app.core.config import ClientSettings, Settings, get_client_settings, get_settings

__all__ = ["ClientSettings", "Settings", "get_client_settings", "get_settings"]
