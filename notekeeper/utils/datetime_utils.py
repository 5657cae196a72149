"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling for the note store.
All datetime operations use the timezone configured in notekeeper.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- now_iso(): Returns ISO 8601 string
- to_store_precision(): Truncate a datetime to what a BSON date can hold
- as_aware(): Attach UTC to naive datetimes read back from MongoDB
- to_iso(): Convert datetime object to ISO 8601 string
"""
import logging
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from notekeeper.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    settings = get_settings()
    tz_str = settings.timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return ZoneInfo(tz_str)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def now_iso() -> str:
    """Current datetime as an ISO 8601 string."""
    return to_iso(now())


def to_store_precision(dt: datetime) -> datetime:
    """
    Truncate a datetime to millisecond precision.

    BSON dates hold milliseconds, so a value written with microseconds would
    not compare equal to the value read back.
    """
    return dt.replace(microsecond=dt.microsecond - dt.microsecond % 1000)


def as_aware(dt: datetime) -> datetime:
    """
    Make a datetime timezone-aware.

    MongoDB stores dates in UTC and pymongo returns them naive unless the
    client was built with tz_aware=True.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    If datetime is naive, assumes UTC (the MongoDB storage timezone).

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string with millisecond precision, or None if dt is None
    """
    if dt is None:
        return None

    dt = as_aware(dt)

    # Format with timezone offset, or 'Z' if UTC
    formatted = dt.isoformat(timespec="milliseconds")
    if dt.utcoffset() is not None and dt.utcoffset().total_seconds() == 0:
        return formatted.replace("+00:00", "Z")
    return formatted
