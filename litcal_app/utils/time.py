"""
Calendar-date utilities for reference-zone "today" and Sunday arithmetic.

Everything in the library reasons in whole days. Instants are reduced to a
date in one reference time zone, so evaluating "today" near midnight never
drifts by a day with the host's local zone.
"""

from datetime import date, datetime, timedelta, tzinfo
from typing import Union

from ..validation.arguments import validate_calendar_date

DateLike = Union[date, datetime]

SUNDAY = 6  # date.weekday()
WEEK = timedelta(days=7)


def get_reference_today(tz: tzinfo) -> date:
    """
    Get today's date in the reference time zone.

    Args:
        tz: Reference time zone

    Returns:
        Current calendar date as seen in tz
    """
    return datetime.now(tz).date()


def to_calendar_date(value: DateLike, tz: tzinfo) -> date:
    """
    Reduce a date or datetime to a calendar date in the reference zone.

    Aware datetimes are converted to tz first. Naive datetimes are taken
    as already expressed in tz.

    Args:
        value: Date or datetime to reduce
        tz: Reference time zone

    Returns:
        Calendar date
    """
    validate_calendar_date(value)

    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(tz)
        return value.date()

    return value


def days_since_sunday(day: date) -> int:
    """Number of days from the Sunday on or before day (0 for a Sunday)."""
    return (day.weekday() - SUNDAY) % 7


def sunday_on_or_before(day: date) -> date:
    """Return day itself if it is a Sunday, else the preceding Sunday."""
    return day - timedelta(days=days_since_sunday(day))


def sunday_on_or_after(day: date) -> date:
    """Return day itself if it is a Sunday, else the following Sunday."""
    return day + timedelta(days=(SUNDAY - day.weekday()) % 7)


def format_calendar_date(day: date) -> str:
    """Format a calendar date as an ISO ``YYYY-MM-DD`` key."""
    return day.isoformat()
