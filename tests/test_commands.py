# tests/test_commands.py

from __future__ import annotations

from smartodo.cli.bootstrap import create_initial_state, save_presets
from smartodo.cli.commands import CommandRegistry, registry
from smartodo.connectors.console_connector import handle_line
from smartodo.tasks.task_models import Priority

from .fakes import make_task


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=lambda _: None) == "h3"
    assert called["h2"] == 1
    assert called["h3"] == 1


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_due_and_at_commands(state) -> None:
    assert (registry.handle(state, "/due tomorrow") or "").startswith("Tomorrow at 9:00 AM")
    assert "Could not understand" in (registry.handle(state, "/due 25:00") or "")
    assert "Could not understand" in (registry.handle(state, "/at never") or "")
    assert "Usage" in (registry.handle(state, "/at") or "")


def test_range_command(state) -> None:
    assert (registry.handle(state, "/range today") or "").startswith("today: ")
    assert "Unknown preset" in (registry.handle(state, "/range someday") or "")
    assert (registry.handle(state, "/range overdue") or "").startswith("overdue: - .. ")


def test_add_list_and_done(state) -> None:
    reply = registry.handle(state, "/add buy milk #home !high @ tomorrow") or ""
    assert reply.startswith("Added: 1. [ ] buy milk (high, default) #home - Tomorrow at 9:00 AM")
    state.tasks.append(make_task("file taxes", priority=Priority.LOW))

    listing = registry.handle(state, "/list [priority:high]") or ""
    assert "buy milk" in listing
    assert "file taxes" not in listing

    assert "now done" in (registry.handle(state, "/done 1") or "")
    assert "(no tasks)" in (registry.handle(state, "/list [status:pending][priority:high]") or "")

    assert registry.handle(state, "/clear") == "Filter cleared."
    assert "file taxes" in (registry.handle(state, "/list") or "")


def test_add_rejects_bad_due_phrase(state) -> None:
    assert "Could not understand" in (registry.handle(state, "/add thing @ someday") or "")
    assert state.tasks == []


def test_plain_text_searches(state) -> None:
    state.tasks.extend([make_task("Call mom"), make_task("Pay rent")])
    reply = handle_line(state, "rent") or ""
    assert "Pay rent" in reply
    assert "Call mom" not in reply
    assert handle_line(state, "   ") is None


def test_preset_commands_round_trip(settings) -> None:
    state = create_initial_state(settings=settings)
    state.tasks.extend([make_task("urgent", priority=Priority.HIGH), make_task("meh")])

    assert "Saved filter 'hot'" in (registry.handle(state, "/preset save hot [priority:high]") or "")
    emitted: list[str] = []
    reply = registry.handle(state, "/preset use hot", emit=emitted.append) or ""
    assert "urgent" in reply and "meh" not in reply
    assert emitted == ["Filter: [priority:high]"]

    save_presets(state)
    reloaded = create_initial_state(settings=settings)
    assert reloaded.presets.names() == ["hot"]
    assert "Removed" in (registry.handle(reloaded, "/preset rm hot") or "")
    assert registry.handle(reloaded, "/preset list") == "No saved filters."
