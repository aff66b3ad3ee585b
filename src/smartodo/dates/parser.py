# src/smartodo/dates/parser.py

"""
Natural-language date/time parsing.

Supported phrases (case-insensitive):
- relative:  "tomorrow", "in 3 days", "in 2h", "in 15 min", "next friday"
- absolute:  "may 20", "Dec 25", "wednesday"
- time only: "2pm", "9:15am", "14:30", "5" (bare hours < 12 are read as PM)

Strategies are tried strictly in the order relative -> absolute -> time;
the first one that recognizes a prefix of the input wins and nothing is
merged between them ("tomorrow 2pm" is tomorrow at 09:00). Text after the
recognized prefix is ignored.

Every public function returns epoch seconds, or None when nothing matched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import NamedTuple

from .clock import (
    DEFAULT_HOUR,
    Anchor,
    days_until_weekday,
    local_now,
    shift_days,
    to_timestamp,
)
from .lexer import Cursor

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

Strategy = Callable[[str, datetime], int | None]

_UNIT_ALIASES = {
    "d": "days",
    "day": "days",
    "days": "days",
    "h": "hours",
    "hr": "hours",
    "hrs": "hours",
    "hour": "hours",
    "hours": "hours",
    "m": "minutes",
    "min": "minutes",
    "mins": "minutes",
    "minute": "minutes",
    "minutes": "minutes",
}


@dataclass(slots=True)
class PartialDate:
    """
    Field-by-field accumulator seeded from "now".

    Grammar rules overwrite individual fields; to_datetime() normalizes a
    day past the end of the month forward into the next month.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @classmethod
    def seeded(cls, now: datetime) -> PartialDate:
        return cls(now.year, now.month, now.day, now.hour, now.minute, now.second)

    def set_date(self, day: date) -> None:
        self.year, self.month, self.day = day.year, day.month, day.day

    def set_time(self, hour: int, minute: int = 0, second: int = 0) -> None:
        self.hour, self.minute, self.second = hour, minute, second

    def to_datetime(self) -> datetime:
        first = datetime(self.year, self.month, 1, self.hour, self.minute, self.second)
        return first + timedelta(days=self.day - 1)

    def to_timestamp(self) -> int:
        return to_timestamp(self.to_datetime())


class RelativeOffset(NamedTuple):
    days: int = 0
    hours: int = 0
    minutes: int = 0
    # True for "tomorrow"/"next <weekday>": the day moves, the time is 09:00.
    day_anchored: bool = False


# ---- grammars ----


def scan_time_of_day(cur: Cursor) -> tuple[int, int] | None:
    """
    <hour>[":"<minute>][am|pm] -> (hour, minute) on the 24h clock.

    Without a suffix, hours below 12 are read as PM (business-hours bias).
    Hour > 23 or minute > 59 after adjustment is a failure.
    """
    start = cur.pos
    cur.skip_whitespace()

    hour = cur.integer()
    if hour is None:
        cur.pos = start
        return None

    cur.skip_whitespace()
    minute = 0
    if cur.match(":"):
        scanned = cur.integer()
        if scanned is None:
            cur.pos = start
            return None
        minute = scanned

    cur.skip_whitespace()
    suffix = None
    for word, is_pm in (("am", False), ("pm", True), ("a", False), ("p", True)):
        if cur.keyword(word):
            suffix = is_pm
            break

    if suffix is not None:
        if hour == 12:
            hour = 12 if suffix else 0
        elif suffix:
            hour += 12
    elif hour < 12:
        hour += 12

    if hour > 23 or minute > 59:
        cur.pos = start
        return None
    return hour, minute


def scan_relative(cur: Cursor, today: date) -> RelativeOffset | None:
    start = cur.pos
    cur.skip_whitespace()

    if cur.keyword("tomorrow"):
        return RelativeOffset(days=1, day_anchored=True)

    if cur.keyword("in"):
        cur.skip_whitespace()
        amount = cur.integer()
        if amount is not None:
            cur.skip_whitespace()
            unit = _UNIT_ALIASES.get(cur.word())
            if unit is not None:
                return RelativeOffset(**{unit: amount})
        cur.pos = start
        return None

    if cur.keyword("next"):
        cur.skip_whitespace()
        weekday = cur.weekday()
        if weekday is not None:
            return RelativeOffset(days=days_until_weekday(today, weekday), day_anchored=True)

    cur.pos = start
    return None


def scan_month_day(cur: Cursor) -> tuple[int, int] | None:
    start = cur.pos
    cur.skip_whitespace()

    month = cur.month()
    if month is None:
        cur.pos = start
        return None

    cur.match(".")
    cur.skip_whitespace()
    cur.match(",")
    cur.skip_whitespace()

    day = cur.integer()
    if day is None or not 1 <= day <= 31:
        cur.pos = start
        return None
    return month, day


# ---- strategies ----


def _relative_strategy(text: str, now: datetime) -> int | None:
    offset = scan_relative(Cursor(text), now.date())
    if offset is None:
        return None

    if offset.day_anchored:
        pd = PartialDate.seeded(now)
        pd.set_date(shift_days(now.date(), offset.days))
        pd.set_time(DEFAULT_HOUR)
        return pd.to_timestamp()

    try:
        base = now.replace(second=0, microsecond=0) + timedelta(days=offset.days)
        ts = to_timestamp(base) + offset.hours * 3600 + offset.minutes * 60
        # The result must still be a representable local datetime.
        datetime.fromtimestamp(ts)
    except (OverflowError, ValueError, OSError):
        logger.debug("Relative offset out of range: %r", text)
        return None
    return ts


def _absolute_strategy(text: str, now: datetime) -> int | None:
    month_day = scan_month_day(Cursor(text))
    if month_day is not None:
        pd = PartialDate.seeded(now)
        pd.month, pd.day = month_day
        pd.set_time(DEFAULT_HOUR)
        ts = pd.to_timestamp()
        if ts < now.timestamp():
            pd.year += 1
            ts = pd.to_timestamp()
        return ts

    cur = Cursor(text)
    cur.skip_whitespace()
    weekday = cur.weekday()
    if weekday is None:
        return None

    pd = PartialDate.seeded(now)
    pd.set_date(shift_days(now.date(), days_until_weekday(now.date(), weekday)))
    pd.set_time(DEFAULT_HOUR)
    return pd.to_timestamp()


def _time_strategy(text: str, now: datetime) -> int | None:
    parsed = scan_time_of_day(Cursor(text))
    if parsed is None:
        return None

    pd = PartialDate.seeded(now)
    pd.set_time(*parsed)
    ts = pd.to_timestamp()
    if ts < now.timestamp():
        ts += SECONDS_PER_DAY
    return ts


_NATURAL_STRATEGIES: tuple[Strategy, ...] = (
    _relative_strategy,
    _absolute_strategy,
    _time_strategy,
)


def first_success(strategies: Sequence[Strategy], text: str, now: datetime) -> int | None:
    for strategy in strategies:
        result = strategy(text, now)
        if result is not None:
            logger.debug("Parsed %r -> %s (%s)", text, result, strategy.__name__.strip("_"))
            return result
    logger.debug("No date grammar matched %r", text)
    return None


def _usable(text: str | None) -> bool:
    return isinstance(text, str) and bool(text.strip())


# ---- public API ----


def parse_natural_date(text: str | None, now: Anchor = None) -> int | None:
    """Parse a free-form date/time phrase relative to `now`."""
    if not _usable(text):
        return None
    return first_success(_NATURAL_STRATEGIES, text, local_now(now))


def parse_time_today(text: str | None, now: Anchor = None) -> int | None:
    """
    Parse a time of day on the current calendar day.

    A time already in the past is moved exactly 24h forward.
    """
    if not _usable(text):
        return None
    return _time_strategy(text, local_now(now))


_STRICT_FORMATS: tuple[tuple[str, bool], ...] = (
    # (format, is_utc)
    ("%Y-%m-%dT%H:%M:%SZ", True),
    ("%Y-%m-%d", False),
    ("%m/%d/%Y", False),
    ("%d/%m/%Y", False),
    ("%b %d, %Y", False),
    ("%d %b %Y", False),
)


def parse_due_date(text: str | None, now: Anchor = None) -> int | None:
    """
    Parse user-supplied due-date input.

    Explicit formats (ISO-8601, numeric and "Dec 25, 2026" styles) are tried
    first and must match the whole string; anything else goes through
    parse_natural_date(). Date-only formats resolve to local midnight.
    """
    if not _usable(text):
        return None
    raw = text.strip()

    for fmt, is_utc in _STRICT_FORMATS:
        try:
            parsed = datetime.strptime(raw, fmt)
        except ValueError:
            continue
        if is_utc:
            return int(parsed.replace(tzinfo=timezone.utc).timestamp())
        return to_timestamp(parsed)

    return parse_natural_date(raw, now)
