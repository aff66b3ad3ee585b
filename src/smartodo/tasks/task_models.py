# src/smartodo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: str | None) -> Priority | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.LOW: 0, Priority.MEDIUM: 1, Priority.HIGH: 2}


class TaskStatus(StrEnum):
    PENDING = "pending"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(slots=True)
class TaskView:
    """
    The fields of a task that filtering and ordering look at.

    Owned by the storage side; filters only read it.
    due/created are epoch seconds, 0 meaning "not set".
    """

    name: str
    due: int = 0
    tags: list[str] = field(default_factory=list)
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    project: str = "default"
    note: str = ""
    created: int = 0

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE

    @property
    def has_due(self) -> bool:
        return self.due != 0
