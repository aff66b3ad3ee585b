"""
smartodo: natural-language due dates and task filtering.

    >>> from smartodo import parse_natural_date, format_natural_date
    >>> ts = parse_natural_date("next monday")
    >>> format_natural_date(ts)  # e.g. "Monday at 9:00 AM"
"""

from .dates import (
    NO_DATE,
    DateRange,
    DateRangePreset,
    format_natural_date,
    in_range,
    parse_due_date,
    parse_natural_date,
    parse_time_today,
    resolve_preset,
)
from .tasks.task_api import filter_from_action, filter_tasks, sort_tasks
from .tasks.task_filters import (
    DateMatch,
    Filter,
    PriorityMatch,
    StatusMatch,
    TextMatch,
    matches,
)
from .tasks.task_models import Priority, TaskStatus, TaskView

__all__ = [
    "NO_DATE",
    "DateMatch",
    "DateRange",
    "DateRangePreset",
    "Filter",
    "Priority",
    "PriorityMatch",
    "StatusMatch",
    "TaskStatus",
    "TaskView",
    "TextMatch",
    "filter_from_action",
    "filter_tasks",
    "format_natural_date",
    "in_range",
    "matches",
    "parse_due_date",
    "parse_natural_date",
    "parse_time_today",
    "resolve_preset",
    "sort_tasks",
]
