# tests/conftest.py

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from smartodo.core.presets import FilterPresets
from smartodo.core.state import AppState


@pytest.fixture(autouse=True)
def utc_local_time(monkeypatch: pytest.MonkeyPatch):
    """
    Pin the process timezone so local-calendar math is deterministic.
    """
    monkeypatch.setenv("TZ", "UTC")
    if hasattr(time, "tzset"):
        time.tzset()
    yield
    monkeypatch.undo()
    if hasattr(time, "tzset"):
        time.tzset()


@pytest.fixture()
def monday() -> datetime:
    """Monday 2026-10-19 10:30 local."""
    return datetime(2026, 10, 19, 10, 30)


@pytest.fixture()
def wednesday() -> datetime:
    return datetime(2026, 10, 21, 15, 0)


@pytest.fixture()
def sunday() -> datetime:
    return datetime(2026, 10, 25, 12, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    A SimpleNamespace rather than the real config keeps tests isolated.
    """
    return SimpleNamespace(
        app_name="smartodo-test",
        log_level="DEBUG",
        console_enabled=False,
        data_dir=tmp_path,
        log_dir=tmp_path,
        presets_path=tmp_path / "filter_presets.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, presets=FilterPresets())
