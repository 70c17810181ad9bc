"""Utility functions for date manipulation."""

from datetime import datetime

import pytz


def now_in_timezone(tz_name: str) -> datetime:
    """Returns the current time in the given timezone, falling back to UTC for unknown names."""
    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        tz = pytz.utc
    return datetime.now(tz)


def format_timestamp(dt: datetime) -> str:
    """Formats a datetime for session banners."""
    return dt.strftime("%Y-%m-%d %H:%M:%S")
