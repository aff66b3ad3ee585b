# src/smartodo/tasks/task_filters.py

"""
Task filters.

A Filter is an AND of typed predicates. It also reads and writes the compact
token form the UI and the action layer pass around:

    "[date:this_week][priority:high] groceries"

Bracketed directives may appear anywhere in the token; whatever text is left
once they are removed becomes a case-insensitive substring match. A token
that is exactly one bare directive ("status:done") is read as that directive.

Unknown directive values (a preset, level or status this module does not
know) do not narrow the result.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

from ..dates.clock import Anchor, local_now
from ..dates.ranges import resolve_preset
from .task_models import Priority, TaskStatus, TaskView

logger = logging.getLogger(__name__)

_DIRECTIVE_RE = re.compile(r"\[\s*(date|priority|status)\s*:\s*([^\]]*?)\s*\]", re.IGNORECASE)
_BARE_DIRECTIVE_RE = re.compile(r"(date|priority|status)\s*:\s*(\S+)", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class DateMatch:
    preset: str

    def matches(self, task: TaskView, now: Anchor = None) -> bool:
        rng = resolve_preset(self.preset, now)
        if rng.unbounded:
            return True
        return rng.contains(task.due)

    def token(self) -> str:
        return f"[date:{self.preset}]"


@dataclass(frozen=True, slots=True)
class PriorityMatch:
    level: str

    def matches(self, task: TaskView, now: Anchor = None) -> bool:
        wanted = Priority.parse(self.level)
        return wanted is None or task.priority == wanted

    def token(self) -> str:
        return f"[priority:{self.level}]"


@dataclass(frozen=True, slots=True)
class StatusMatch:
    state: str

    def matches(self, task: TaskView, now: Anchor = None) -> bool:
        wanted = TaskStatus.parse(self.state)
        return wanted is None or task.status == wanted

    def token(self) -> str:
        return f"[status:{self.state}]"


@dataclass(frozen=True, slots=True)
class TextMatch:
    text: str

    def matches(self, task: TaskView, now: Anchor = None) -> bool:
        needle = self.text.lower()
        if not needle:
            return True
        if needle in (task.name or "").lower():
            return True
        if any(needle in (tag or "").lower() for tag in task.tags):
            return True
        if needle in (task.project or "").lower():
            return True
        return needle in (task.note or "").lower()

    def token(self) -> str:
        return self.text


Predicate = Union[DateMatch, PriorityMatch, StatusMatch, TextMatch]

_DIRECTIVES: dict[str, type[DateMatch] | type[PriorityMatch] | type[StatusMatch]] = {
    "date": DateMatch,
    "priority": PriorityMatch,
    "status": StatusMatch,
}


def directive(kind: str, value: str) -> Predicate:
    """Build a directive predicate, e.g. directive("priority", "high")."""
    cls = _DIRECTIVES.get(kind.strip().lower())
    if cls is None:
        raise ValueError(f"Unknown filter type: {kind!r}")
    return cls(value.strip().lower())


@dataclass(frozen=True, slots=True)
class Filter:
    predicates: tuple[Predicate, ...] = ()

    @classmethod
    def parse(cls, token: str | None) -> Filter:
        if not token or not token.strip():
            return cls()

        found: list[Predicate] = []

        def _take(m: re.Match[str]) -> str:
            found.append(directive(m.group(1), m.group(2)))
            return " "

        rest = _DIRECTIVE_RE.sub(_take, token).strip()

        if rest:
            bare = _BARE_DIRECTIVE_RE.fullmatch(rest)
            if bare is not None:
                found.append(directive(bare.group(1), bare.group(2)))
            else:
                found.append(TextMatch(rest))

        logger.debug("Filter token %r -> %s", token, found)
        return cls(tuple(found))

    @property
    def is_empty(self) -> bool:
        return not self.predicates

    def matches(self, task: TaskView, now: Anchor = None) -> bool:
        if not self.predicates:
            return True
        anchor = local_now(now)
        return all(p.matches(task, anchor) for p in self.predicates)

    def to_token(self) -> str:
        directives = "".join(p.token() for p in self.predicates if not isinstance(p, TextMatch))
        text = " ".join(p.token() for p in self.predicates if isinstance(p, TextMatch))
        if directives and text:
            return f"{directives} {text}"
        return directives or text

    def __and__(self, other: Filter) -> Filter:
        return Filter(self.predicates + other.predicates)


FilterLike = Union[Filter, str, None]


def as_filter(value: FilterLike) -> Filter:
    return value if isinstance(value, Filter) else Filter.parse(value)


def matches(task: TaskView, flt: FilterLike, now: Anchor = None) -> bool:
    """True when `task` satisfies every predicate of `flt` (a Filter or a token)."""
    return as_filter(flt).matches(task, now)
