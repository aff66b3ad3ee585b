# src/smartodo/dates/ranges.py

from __future__ import annotations

import logging
from enum import StrEnum
from typing import NamedTuple

from .clock import Anchor, NO_DATE, days_until_weekday, end_of_day, local_now, midnight, shift_days

logger = logging.getLogger(__name__)

SUNDAY = 6
MONDAY = 0


class DateRangePreset(StrEnum):
    TODAY = "today"
    TOMORROW = "tomorrow"
    THIS_WEEK = "this_week"
    NEXT_WEEK = "next_week"
    OVERDUE = "overdue"

    @classmethod
    def parse(cls, raw: str | None) -> DateRangePreset | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class DateRange(NamedTuple):
    """
    Inclusive [start, end] in epoch seconds.

    A zero bound is unbounded on that side; (0, 0) matches every due date.
    """

    start: int = NO_DATE
    end: int = NO_DATE

    @property
    def unbounded(self) -> bool:
        return self.start == NO_DATE and self.end == NO_DATE

    def contains(self, due: int) -> bool:
        return in_range(due, self.start, self.end)


def resolve_preset(name: str | DateRangePreset | None, now: Anchor = None) -> DateRange:
    """
    Resolve a preset name to concrete bounds on local-midnight boundaries.

    Weeks start on Monday. An unknown name resolves to DateRange(0, 0).
    """
    preset = name if isinstance(name, DateRangePreset) else DateRangePreset.parse(name)
    if preset is None:
        logger.debug("Unknown date preset %r; no date bounds applied", name)
        return DateRange()

    today = local_now(now).date()

    if preset is DateRangePreset.TODAY:
        return DateRange(midnight(today), end_of_day(today))

    if preset is DateRangePreset.TOMORROW:
        tomorrow = shift_days(today, 1)
        return DateRange(midnight(tomorrow), end_of_day(tomorrow))

    if preset is DateRangePreset.THIS_WEEK:
        # On a Sunday the window runs through the following Sunday.
        sunday = shift_days(today, days_until_weekday(today, SUNDAY))
        return DateRange(midnight(today), end_of_day(sunday))

    if preset is DateRangePreset.NEXT_WEEK:
        monday = shift_days(today, days_until_weekday(today, MONDAY))
        return DateRange(midnight(monday), end_of_day(shift_days(monday, 6)))

    # OVERDUE
    return DateRange(NO_DATE, midnight(today) - 1)


def in_range(due: int | None, start: int, end: int) -> bool:
    """Inclusive bounds check; a task without a due date never matches."""
    if not due:
        return False
    if start and due < start:
        return False
    if end and due > end:
        return False
    return True
