"""
Date subsystem.

Components:
- lexer.py: cursor-based scanning primitives (numbers, weekday/month names)
- clock.py: "now" anchor normalization and local-calendar helpers
- parser.py: natural-language phrase -> epoch seconds
- ranges.py: named date windows (today, this_week, overdue, ...)
- formatter.py: epoch seconds -> "Tomorrow at 9:00 AM"
"""

from .clock import NO_DATE
from .formatter import format_natural_date
from .parser import parse_due_date, parse_natural_date, parse_time_today
from .ranges import DateRange, DateRangePreset, in_range, resolve_preset

__all__ = [
    "NO_DATE",
    "DateRange",
    "DateRangePreset",
    "format_natural_date",
    "in_range",
    "parse_due_date",
    "parse_natural_date",
    "parse_time_today",
    "resolve_preset",
]
