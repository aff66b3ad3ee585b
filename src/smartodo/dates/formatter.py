# src/smartodo/dates/formatter.py

from __future__ import annotations

from datetime import datetime

from .clock import Anchor, NO_DATE, local_now
from .lexer import MONTH_NAMES, WEEKDAY_NAMES

NO_DUE_DATE_TEXT = "No due date"


def _clock_text(dt: datetime) -> str:
    hour12 = dt.hour % 12 or 12
    meridiem = "PM" if dt.hour >= 12 else "AM"
    return f"{hour12}:{dt.minute:02d} {meridiem}"


def format_natural_date(timestamp: int | None, now: Anchor = None) -> str:
    """
    Humanized due date relative to `now`:
    "Today at 2:30 PM", "Tomorrow at 9:00 AM", "Friday at 9:00 AM" (2-6 days
    ahead) or "May 20 at 9:00 AM" (anything else, past dates included).
    """
    if not timestamp:
        return NO_DUE_DATE_TEXT

    when = datetime.fromtimestamp(timestamp)
    days_diff = (when.date() - local_now(now).date()).days
    clock = _clock_text(when)

    if days_diff == 0:
        return f"Today at {clock}"
    if days_diff == 1:
        return f"Tomorrow at {clock}"
    if 1 < days_diff < 7:
        return f"{WEEKDAY_NAMES[when.weekday()].title()} at {clock}"
    return f"{MONTH_NAMES[when.month - 1][:3].title()} {when.day:02d} at {clock}"
