# src/smartodo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds AppState and loads/saves the saved-filter registry.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.presets import FilterPresets
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.presets_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        presets=FilterPresets.load(settings.presets_path),
    )


def save_presets(state: AppState) -> None:
    path = getattr(state.settings, "presets_path", None)
    if not path:
        return
    try:
        state.presets.save(path)
    except Exception:
        logger.exception("Failed to save filter presets to %s", path)
