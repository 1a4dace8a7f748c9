"""
Date and time helpers.
"""

from datetime import datetime
from typing import Optional
import pytz


def now_in_tz(tz_name: str = "UTC") -> datetime:
    """Current time as an aware datetime in ``tz_name``."""
    return datetime.now(pytz.timezone(tz_name))


def localize(dt: datetime, tz_name: str = "UTC") -> datetime:
    """Attach ``tz_name`` to naive datetimes; aware ones are returned unchanged."""
    if dt.tzinfo is not None:
        return dt
    return pytz.timezone(tz_name).localize(dt)


def format_time_ago(dt: datetime, now: Optional[datetime] = None) -> str:
    """
    Format a datetime as a short relative label.

    Returns "Just now" under an hour, "{h}h ago" under a day and "{d}d ago"
    otherwise.
    """
    dt = localize(dt)
    now = now or datetime.now(pytz.utc)
    hours = int((now - dt).total_seconds() // 3600)
    days = hours // 24
    if days > 0:
        return f"{days}d ago"
    if hours > 0:
        return f"{hours}h ago"
    return "Just now"
