# -*- coding: utf-8 -*-
"""
DateTime Utilities

Centralized datetime handling for draft fields and meal-session arithmetic.

Draft timestamps are naive local wall-clock datetimes (what a
``datetime-local`` form input produces). Aware values coming back from the
API are converted to local time so that calendar-day comparisons use the
local day.
"""

from datetime import datetime, date, time, timedelta
from typing import Iterator, Optional, Union

# Last millisecond of a day, 23:59:59.999
END_OF_DAY = time(23, 59, 59, 999000)


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def from_isoformat(value: Union[str, datetime, date, None]) -> Optional[datetime]:
    """
    Convert an ISO format string to a naive local datetime.

    Empty strings (an untouched form field) and unparseable values map to None.

    Examples:
        >>> from_isoformat('2025-01-10T09:00')
        datetime(2025, 1, 10, 9, 0)
        >>> from_isoformat('2025-01-10')
        datetime(2025, 1, 10, 0, 0)
        >>> from_isoformat('')
        None
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return to_local_naive(value)

    if isinstance(value, date):
        return datetime.combine(value, time.min)

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        # fromisoformat() only accepts a trailing "Z" from 3.11 on
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        try:
            if 'T' in value or ' ' in value:
                return to_local_naive(datetime.fromisoformat(value))
            return datetime.combine(date.fromisoformat(value), time.min)
        except ValueError:
            return None

    return None


def to_isoformat(value: Optional[datetime]) -> Optional[str]:
    """Serialize a draft timestamp; None stays None."""
    if value is None:
        return None
    return value.isoformat()


def end_of_day(value: datetime) -> datetime:
    """Last millisecond (23:59:59.999) of the value's calendar day."""
    return datetime.combine(value.date(), END_OF_DAY)


def is_same_day(first: datetime, second: datetime) -> bool:
    """True when both timestamps fall on the same local calendar day."""
    return first.date() == second.date()


def iter_days(start: datetime, end: Optional[datetime] = None) -> Iterator[date]:
    """
    Yield every calendar day from start to end (inclusive).

    When end is missing or before start, only the start day is yielded.
    """
    current = start.date()
    last = end.date() if end is not None else current
    if last < current:
        last = current
    while current <= last:
        yield current
        current += timedelta(days=1)


def now() -> datetime:
    """Current local time, naive."""
    return datetime.now()
