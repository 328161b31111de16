"""Bearer token handling.

Access tokens are issued by the session service and signed with the shared
SECRET_KEY. The dashboard only needs the caller's user id, read from the
``sub`` claim. create_access_token signs tokens for scripts and tests.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from app.core.config import get_settings


def create_access_token(
    claims: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Sign claims (normally ``{"sub": user_id}``) with an ``exp`` added."""
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {**claims, "exp": datetime.now(UTC) + ttl}
    return jwt.encode(
        payload, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )


def verify_token(token: str) -> dict[str, Any]:
    """Decode a token, requiring a valid signature, ``exp`` and a non-empty ``sub``.

    Raises:
        ValueError: on any of those failing.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e}") from e
    if not payload.get("sub"):
        raise ValueError("Token has an empty sub claim")
    return payload
