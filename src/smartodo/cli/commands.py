# src/smartodo/cli/commands.py

from __future__ import annotations

import inspect
import logging
import time
from collections.abc import Callable
from datetime import datetime
from typing import cast

from ..core.state import AppState
from ..dates import (
    DateRangePreset,
    format_natural_date,
    parse_due_date,
    parse_time_today,
    resolve_preset,
)
from ..tasks.task_api import SORT_FIELDS, sort_tasks
from ..tasks.task_filters import Filter
from ..tasks.task_models import Priority, TaskStatus, TaskView

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /due, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _ts_local(ts: int) -> str:
    return datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M:%S")


def _render_task(index: int, task: TaskView) -> str:
    mark = "x" if task.is_done else " "
    tags = f" #{' #'.join(task.tags)}" if task.tags else ""
    return (
        f"{index}. [{mark}] {task.name} ({task.priority.value}, {task.project}){tags}"
        f" - {format_natural_date(task.due)}"
    )


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_due(state: AppState, args: list[str]) -> str:
    """/due <phrase> -> show what a due-date phrase resolves to."""
    phrase = " ".join(args)
    if not phrase:
        return "Usage: /due <phrase>, e.g. /due next monday"
    ts = parse_due_date(phrase)
    if ts is None:
        return f"Could not understand date: {phrase}"
    return f"{format_natural_date(ts)} ({_ts_local(ts)})"


def cmd_at(state: AppState, args: list[str]) -> str:
    """/at <time> -> next occurrence of a time of day."""
    phrase = " ".join(args)
    if not phrase:
        return "Usage: /at <time>, e.g. /at 2:30pm"
    ts = parse_time_today(phrase)
    if ts is None:
        return f"Could not understand time: {phrase}"
    return f"{format_natural_date(ts)} ({_ts_local(ts)})"


def cmd_range(state: AppState, args: list[str]) -> str:
    """/range <preset> -> concrete bounds of a named date window."""
    if not args:
        names = ", ".join(p.value for p in DateRangePreset)
        return f"Usage: /range <preset>. Presets: {names}"
    rng = resolve_preset(args[0])
    if rng.unbounded:
        return f"Unknown preset: {args[0]} (no date bounds)."
    start = _ts_local(rng.start) if rng.start else "-"
    return f"{args[0]}: {start} .. {_ts_local(rng.end)}"


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <name> [#tag ...] [!high|!medium|!low] [@ <due phrase>]
    """
    if not args:
        return "Usage: /add <name> [#tag] [!priority] [@ <due phrase>]"

    due_phrase = ""
    if "@" in args:
        at = args.index("@")
        due_phrase = " ".join(args[at + 1 :])
        args = args[:at]

    words: list[str] = []
    tags: list[str] = []
    priority = Priority.MEDIUM
    for arg in args:
        if arg.startswith("#") and len(arg) > 1:
            tags.append(arg[1:])
        elif arg.startswith("!") and Priority.parse(arg[1:]) is not None:
            priority = cast(Priority, Priority.parse(arg[1:]))
        else:
            words.append(arg)

    name = " ".join(words).strip()
    if not name:
        return "Task name is required."

    due = 0
    if due_phrase:
        parsed = parse_due_date(due_phrase)
        if parsed is None:
            return f"Could not understand date: {due_phrase}"
        due = parsed

    task = TaskView(name=name, due=due, tags=tags, priority=priority, created=int(time.time()))
    state.tasks.append(task)
    logger.debug("Task added name=%r due=%s priority=%s", name, due, priority.value)
    return f"Added: {_render_task(len(state.tasks), task)}"


def cmd_done(state: AppState, args: list[str]) -> str:
    """/done <n> -> toggle done/pending for the n-th listed task."""
    visible = state.visible_tasks()
    try:
        idx = int(args[0]) - 1
    except (IndexError, ValueError):
        return "Usage: /done <n> (number from /list)"
    if not 0 <= idx < len(visible):
        return f"No task #{idx + 1} in the current list."

    task = visible[idx]
    task.status = TaskStatus.PENDING if task.is_done else TaskStatus.DONE
    return f"Task '{task.name}' is now {task.status.value}."


def cmd_list(state: AppState, args: list[str]) -> str:
    """/list [filter] -> list tasks; a filter argument becomes the active filter."""
    if args:
        state.active_filter = Filter.parse(" ".join(args))

    visible = state.visible_tasks()
    header = f"Filter: {state.active_filter.to_token()}" if not state.active_filter.is_empty else "All tasks"
    if not visible:
        return f"{header}\n  (no tasks)"
    return "\n".join([header, *(_render_task(i, t) for i, t in enumerate(visible, start=1))])


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.active_filter = Filter()
    return "Filter cleared."


def cmd_sort(state: AppState, args: list[str]) -> str:
    field_name = args[0] if args else "due"
    try:
        state.tasks = sort_tasks(state.tasks, field_name)
    except ValueError as e:
        return str(e)
    return f"Sorted by {field_name}."


def cmd_preset(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /preset list              -> show saved filters
    /preset save <name> <f>   -> save a filter under a name
    /preset use <name>        -> make a saved filter active
    /preset rm <name>         -> delete a saved filter
    """
    usage = "Usage: /preset list | save <name> <filter> | use <name> | rm <name>"
    if not args:
        return usage

    sub = args[0].lower()

    if sub == "list":
        if not len(state.presets):
            return "No saved filters."
        lines = ["Saved filters:"]
        for name in state.presets.names():
            flt = state.presets.get(name)
            lines.append(f"  {name}: {flt.to_token() if flt else ''}")
        return "\n".join(lines)

    if sub == "save":
        if len(args) < 3:
            return usage
        try:
            flt = state.presets.add(args[1], " ".join(args[2:]))
        except ValueError as e:
            return str(e)
        return f"Saved filter '{args[1]}': {flt.to_token()}"

    if sub == "use":
        if len(args) < 2:
            return usage
        flt = state.presets.get(args[1])
        if flt is None:
            return f"No saved filter named '{args[1]}'."
        state.active_filter = flt
        if emit:
            emit(f"Filter: {flt.to_token()}")
        return cmd_list(state, [])

    if sub in ("rm", "remove", "delete"):
        if len(args) < 2:
            return usage
        if state.presets.remove(args[1]):
            return f"Removed filter '{args[1]}'."
        return f"No saved filter named '{args[1]}'."

    return usage


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("due", cmd_due, help_text="Resolve a date phrase: /due next monday.")
registry.register("at", cmd_at, help_text="Resolve a time of day: /at 2:30pm.")
registry.register("range", cmd_range, help_text="Show a date window: /range this_week.")
registry.register("add", cmd_add, help_text="Add a task: /add call bob #work !high @ tomorrow.")
registry.register("done", cmd_done, help_text="Toggle done for task n of the current list.")
registry.register(
    "list", cmd_list, help_text="List tasks, optionally filtered: /list [date:today] milk.", aliases=["ls"]
)
registry.register("clear", cmd_clear, help_text="Clear the active filter.")
registry.register("sort", cmd_sort, help_text=f"Sort tasks: /sort {'|'.join(SORT_FIELDS)}.")
registry.register("preset", cmd_preset, help_text="Saved filters: /preset list | save | use | rm.")
