# src/smartodo/dates/clock.py

"""
Anchor ("now") handling shared by the parsers and the range resolver.

All calendar math runs on naive *local* datetimes, so DST transitions are
handled by the platform when converting back to epoch seconds.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Union

Anchor = Union[datetime, int, float, None]

DEFAULT_HOUR = 9
NO_DATE = 0


def local_now(now: Anchor = None) -> datetime:
    """
    Normalize an anchor to a naive local datetime.

    - None      -> the wall clock, read fresh on every call
    - int/float -> epoch seconds
    - aware     -> converted to the local zone
    - naive     -> assumed local already
    """
    if now is None:
        return datetime.now()
    if isinstance(now, (int, float)):
        return datetime.fromtimestamp(now)
    if now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


def to_timestamp(dt: datetime) -> int:
    return int(dt.timestamp())


def at_time(day: date, hour: int = DEFAULT_HOUR, minute: int = 0, second: int = 0) -> datetime:
    return datetime.combine(day, time(hour, minute, second))


def midnight(day: date) -> int:
    return to_timestamp(at_time(day, 0, 0, 0))


def end_of_day(day: date) -> int:
    return to_timestamp(at_time(day, 23, 59, 59))


def days_until_weekday(today: date, weekday: int) -> int:
    """Strictly positive offset (1..7) to the next `weekday` (Monday=0)."""
    return (weekday - today.weekday() - 1) % 7 + 1


def shift_days(day: date, days: int) -> date:
    return day + timedelta(days=days)
