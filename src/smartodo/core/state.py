# src/smartodo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_api import filter_tasks
from ..tasks.task_filters import Filter
from ..tasks.task_models import TaskView
from .presets import FilterPresets


@dataclass
class AppState:
    """
    Everything a console session works on.

    `settings` is duck-typed (real Settings or a test namespace).
    `tasks` is the list handed over by the storage side.
    """

    settings: object
    presets: FilterPresets = field(default_factory=FilterPresets)
    tasks: list[TaskView] = field(default_factory=list)
    active_filter: Filter = field(default_factory=Filter)

    def visible_tasks(self) -> list[TaskView]:
        return filter_tasks(self.tasks, self.active_filter)
