"""UTC datetime helpers.

Task timestamps are always timezone-aware UTC inside the service. Clients may
send dueDateTime without an offset and SQLite returns naive values, so both
boundaries normalize through ensure_utc.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt in UTC; a naive value is taken to be UTC already. None passes through."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
