"""UTC-aware datetime helpers.

Due dates and creation times are compared as aware UTC datetimes
everywhere: the repository normalises what the driver returns and the
client normalises what it parses from JSON.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Attach UTC to naive values and convert aware ones; None passes through."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_iso_utc(value: str | datetime | None) -> datetime | None:
    """Coerce an ISO-8601 string or a datetime to an aware UTC datetime.

    A trailing "Z" is accepted; an empty string counts as missing.

    Raises:
        ValueError: for a string that is not ISO-8601.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def format_short_date(dt: datetime) -> str:
    """Format as "Jan 5, 2025" (abbreviated month, unpadded day)."""
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}"
