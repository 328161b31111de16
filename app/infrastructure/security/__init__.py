"""Security: bearer token verification (tokens are issued by the session service)."""

from app.infrastructure.security.jwt import create_access_token, verify_token

__all__ = [
    "create_access_token",
    "verify_token",
]
