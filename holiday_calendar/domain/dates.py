"""
Date utilities for moveable feasts and weekday shifting.

All functions take and return immutable ``datetime.date`` values.
Weekdays are numbered from Sunday (0) to Saturday (6).
"""

import datetime
from enum import IntEnum
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.easter import easter, EASTER_WESTERN

from holiday_calendar.domain.exceptions import InvalidArgumentError


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def weekday_of(date_obj: datetime.date) -> Weekday:
    """Return the weekday of a date, 0 = Sunday."""
    # isoweekday: Monday=1 ... Sunday=7
    return Weekday(date_obj.isoweekday() % 7)


def is_weekend(date_obj: datetime.date) -> bool:
    """Check if date falls on Saturday or Sunday"""
    return weekday_of(date_obj) in (Weekday.SATURDAY, Weekday.SUNDAY)


def next_weekday(date_obj: datetime.date, weekday: Weekday) -> datetime.date:
    """
    Get the first date strictly after ``date_obj`` falling on ``weekday``.

    Args:
        date_obj: The reference date
        weekday: Target weekday

    Returns:
        A new date, never ``date_obj`` itself
    """
    days_ahead = (int(weekday) - int(weekday_of(date_obj))) % 7 or 7
    return date_obj + datetime.timedelta(days=days_ahead)


def previous_weekday(date_obj: datetime.date, weekday: Weekday) -> datetime.date:
    """
    Get the last date strictly before ``date_obj`` falling on ``weekday``.

    Args:
        date_obj: The reference date
        weekday: Target weekday

    Returns:
        A new date, never ``date_obj`` itself
    """
    days_behind = (int(weekday_of(date_obj)) - int(weekday)) % 7 or 7
    return date_obj - datetime.timedelta(days=days_behind)


def shift_to_monday(date_obj: datetime.date) -> datetime.date:
    """
    Apply the move-to-Monday rule.

    Tuesday, Wednesday and Thursday move to the previous Monday, Friday
    moves to the next Monday. Any other day is returned unchanged.
    """
    weekday = weekday_of(date_obj)
    if weekday in (Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY):
        return previous_weekday(date_obj, Weekday.MONDAY)
    if weekday == Weekday.FRIDAY:
        return next_weekday(date_obj, Weekday.MONDAY)
    return date_obj


def compute_easter(year: int) -> datetime.date:
    """
    Get Gregorian (Western) Easter Sunday for the given year.

    Raises:
        InvalidArgumentError: If the year is outside the supported date range
    """
    try:
        return easter(year, EASTER_WESTERN)
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidArgumentError(f"Invalid year: {year!r}", {"year": year}) from e


@lru_cache(maxsize=None)
def get_zone(timezone: str) -> ZoneInfo:
    """
    Resolve an IANA timezone identifier.

    Raises:
        InvalidArgumentError: If the identifier is unknown or malformed
    """
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise InvalidArgumentError(
            f"Invalid timezone: {timezone!r}", {"timezone": timezone}
        ) from e


def make_date(year: int, month: int, day: int, timezone: str) -> datetime.date:
    """
    Build a calendar date anchored to a timezone.

    Args:
        year: Calendar year
        month: Month (1-12)
        day: Day of month
        timezone: IANA timezone identifier of the region

    Returns:
        The date

    Raises:
        InvalidArgumentError: If the timezone or the calendar date is invalid
    """
    get_zone(timezone)
    try:
        return datetime.date(year, month, day)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(
            f"Invalid date: {year}-{month}-{day}",
            {"year": year, "month": month, "day": day},
        ) from e
