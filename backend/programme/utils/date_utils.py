"""
Date and interval utilities.

All ranges use an end-exclusive convention: a milestone planned from
2024-01-01 to 2024-01-05 occupies four days (1st to 4th), and two ranges that
only touch at a boundary do not overlap.
"""

import math
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

# UTC timezone constant
UTC = timezone.utc

DATE_FORMAT = "%Y-%m-%d"

DateLike = Union[date, datetime]


def now_utc() -> datetime:
    """
    Get current UTC datetime (timezone-aware).

    Returns:
        datetime: Current UTC time with tzinfo set to UTC
    """
    return datetime.now(UTC)


def today_utc() -> date:
    """Get today's date in UTC."""
    return now_utc().date()


def parse_date(value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` string (or an ISO datetime string) to a date.

    Raises:
        ValueError: If the string cannot be parsed
    """
    value = value.strip()
    if len(value) > 10:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return date.fromisoformat(value)


def format_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.strftime(DATE_FORMAT)


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def _as_utc_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    return datetime(value.year, value.month, value.day, tzinfo=UTC)


def days_until(target: DateLike, now: Optional[datetime] = None) -> int:
    """
    Signed number of days from now until ``target``, rounded up.

    A plain date is taken as midnight UTC, so a date that is today yields 0
    rather than a negative fraction.

    Example:
        >>> days_until(date(2024, 1, 20), now=datetime(2024, 1, 19, 15, 0, tzinfo=UTC))
        1
    """
    current = _as_utc_datetime(now) if now is not None else now_utc()
    delta = _as_utc_datetime(target) - current
    return math.ceil(delta.total_seconds() / 86400)


def is_overdue(target: DateLike, today: Optional[DateLike] = None) -> bool:
    """
    True iff ``target`` is strictly before now.

    Plain dates are compared at day resolution (a milestone due today is not
    overdue), datetimes at instant resolution.
    """
    if isinstance(target, datetime):
        current = _as_utc_datetime(today) if today is not None else now_utc()
        return _as_utc_datetime(target) < current

    if today is None:
        current_day = today_utc()
    elif isinstance(today, datetime):
        current_day = _as_utc_datetime(today).date()
    else:
        current_day = today
    return target < current_day


def days_between(start: date, end: date) -> int:
    """Whole days from ``start`` to ``end`` (end-exclusive, may be negative)."""
    return (end - start).days


def days_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> int:
    """
    Number of whole days shared by two end-exclusive ranges.

    Returns 0 when the ranges are disjoint or only touch at a boundary.
    """
    overlap_start = max(start_a, start_b)
    overlap_end = min(end_a, end_b)
    if overlap_start >= overlap_end:
        return 0
    return (overlap_end - overlap_start).days
