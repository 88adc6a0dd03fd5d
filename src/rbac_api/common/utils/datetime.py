"""
DateTime utilities for consistent timezone handling.

Stored timestamps are ISO-8601 strings in UTC with millisecond precision and a
trailing ``Z``, the format existing records in the store already use.
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get the current UTC time with timezone awareness.
    
    Returns:
        datetime: Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """
    Format a datetime as an ISO-8601 UTC string (``2024-01-31T12:00:00.000Z``).
    
    Naive datetimes are assumed to already be in UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Current UTC time as a stored timestamp string."""
    return to_iso(utc_now())
