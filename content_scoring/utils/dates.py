"""
Date helpers

Day and calendar-month arithmetic against an injectable "now".
"""

import calendar
from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve_now(now: Optional[datetime]) -> datetime:
    """Return now (made UTC-aware if naive) or the current UTC time."""
    if now is None:
        return utc_now()
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def days_since(published_at: datetime, now: datetime) -> int:
    """Whole days elapsed since published_at (negative for future dates)."""
    return (now - published_at) // timedelta(days=1)


def within_days(published_at: datetime, days: int, now: datetime) -> bool:
    """True if published_at is at or after now - days."""
    return published_at >= now - timedelta(days=days)


def months_before(now: datetime, months: int) -> datetime:
    """
    Same day-of-month and time, `months` calendar months earlier.

    The day is clamped to the length of the target month (Mar 31 - 1 month = Feb 28/29).
    Offsets reaching before year 1 clamp to datetime.min.
    """
    month_index = now.year * 12 + (now.month - 1) - months
    year, month = divmod(month_index, 12)
    if year < datetime.min.year:
        return datetime.min.replace(tzinfo=timezone.utc)
    month += 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)
