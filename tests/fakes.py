# tests/fakes.py

from __future__ import annotations

from datetime import datetime
from typing import Any

from smartodo.tasks.task_models import Priority, TaskStatus, TaskView


def local_ts(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> int:
    """Epoch seconds for a local wall-clock time."""
    return int(datetime(year, month, day, hour, minute, second).timestamp())


def make_task(name: str = "task", **overrides: Any) -> TaskView:
    """TaskView with sensible defaults; keyword overrides win."""
    fields: dict[str, Any] = {
        "due": 0,
        "tags": [],
        "priority": Priority.MEDIUM,
        "status": TaskStatus.PENDING,
        "project": "default",
        "note": "",
        "created": 0,
    }
    fields.update(overrides)
    return TaskView(name=name, **fields)
