"""Issue a development access token for a user id.

Usage:
    uv run python -m scripts.issue_dev_token <user_id> [minutes]
Tokens are signed with SECRET_KEY, the same key the API verifies with.
All imports use app.*.
"""

import sys
from datetime import timedelta

from app.core.config import get_settings
from app.infrastructure.security.jwt import create_access_token


def main() -> None:
    """Print a bearer token whose sub claim is the given user id."""
    if len(sys.argv) < 2:
        print(
            "Usage: uv run python -m scripts.issue_dev_token <user_id> [minutes]",
            file=sys.stderr,
        )
        sys.exit(1)
    user_id = sys.argv[1]
    minutes = int(sys.argv[2]) if len(sys.argv) > 2 else None

    get_settings()
    token = create_access_token(
        {"sub": user_id},
        expires_delta=timedelta(minutes=minutes) if minutes else None,
    )
    print(token)


if __name__ == "__main__":
    main()
