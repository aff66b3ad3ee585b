# src/smartodo/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..dates.clock import Anchor, local_now
from .task_filters import Filter, FilterLike, TextMatch, as_filter, directive
from .task_models import TaskView

logger = logging.getLogger(__name__)

SORT_FIELDS = ("name", "due", "creation")


def filter_tasks(tasks: Iterable[TaskView], flt: FilterLike, now: Anchor = None) -> list[TaskView]:
    """Tasks matching `flt`, in their original order. One clock reading per call."""
    compiled = as_filter(flt)
    anchor = local_now(now)
    return [t for t in tasks if compiled.matches(t, anchor)]


def _due_key(task: TaskView) -> tuple[int, int, int]:
    # Tasks without a due date go last; same due -> higher priority first.
    if not task.has_due:
        return (1, 0, 0)
    return (0, task.due, -task.priority.rank)


def sort_tasks(tasks: Iterable[TaskView], by: str = "due") -> list[TaskView]:
    key = (by or "").strip().lower()
    if key == "name":
        return sorted(tasks, key=lambda t: t.name)
    if key in ("creation", "created"):
        return sorted(tasks, key=lambda t: t.created)
    if key in ("due", "prio", "priority"):
        return sorted(tasks, key=_due_key)
    raise ValueError(f"Unknown sort field: {by!r}. Use one of: {', '.join(SORT_FIELDS)}.")


def _require_str(params: Mapping[str, Any], name: str, action: str) -> str:
    value = params.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Missing or invalid '{name}' parameter for {action}.")
    return value


def filter_from_action(action: str, params: Mapping[str, Any] | None = None) -> Filter:
    """
    Translate a structured filter action into a Filter.

    Supported actions:
      filter_by_date     {"range": "today"|"tomorrow"|"this_week"|"next_week"|"overdue"}
      filter_by_priority {"level": "high"|"medium"|"low"}
      filter_by_status   {"status": "done"|"pending"}
      filter_combined    {"filters": [{"type": "date"|"priority"|"status", "value": str}, ...]}
      search_tasks       {"term": str | null}   (null clears the filter)
      list_tasks         {}

    Raises ValueError with a user-facing message on bad parameters.
    """
    params = params or {}
    name = (action or "").strip().lower()

    if name == "filter_by_date":
        return Filter((directive("date", _require_str(params, "range", name)),))

    if name == "filter_by_priority":
        return Filter((directive("priority", _require_str(params, "level", name)),))

    if name == "filter_by_status":
        return Filter((directive("status", _require_str(params, "status", name)),))

    if name == "filter_combined":
        items = params.get("filters")
        if not isinstance(items, list) or not items:
            raise ValueError("Missing or invalid 'filters' array for filter_combined.")

        predicates = []
        for item in items:
            if not isinstance(item, Mapping):
                continue
            kind, value = item.get("type"), item.get("value")
            if not isinstance(kind, str) or not isinstance(value, str) or not value.strip():
                continue
            try:
                predicates.append(directive(kind, value))
            except ValueError:
                logger.debug("Skipping unknown filter type %r in filter_combined", kind)

        if not predicates:
            raise ValueError("No valid filters found in the combined filter.")
        return Filter(tuple(predicates))

    if name == "search_tasks":
        term = params.get("term")
        if term is None:
            return Filter()
        if not isinstance(term, str):
            raise ValueError("Missing or invalid 'term' parameter for search_tasks.")
        return Filter((TextMatch(term.strip()),)) if term.strip() else Filter()

    if name == "list_tasks":
        return Filter()

    raise ValueError(f"Unsupported filter action: {action!r}")
