# src/smartodo/core/presets.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ..tasks.task_filters import Filter, FilterLike, as_filter

logger = logging.getLogger(__name__)


class FilterPresets:
    """
    Named filters saved by the user ("work" -> "[priority:high] @work").

    The registry is a plain owned object: nothing is read or written
    implicitly. Call load()/save() at the boundaries of a session.
    """

    def __init__(self, presets: dict[str, Filter] | None = None) -> None:
        self._presets: dict[str, Filter] = dict(presets or {})

    def __len__(self) -> int:
        return len(self._presets)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._presets

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def names(self) -> list[str]:
        return sorted(self._presets)

    def add(self, name: str, flt: FilterLike) -> Filter:
        if not name or not name.strip():
            raise ValueError("preset name is required")
        compiled = as_filter(flt)
        self._presets[self._key(name)] = compiled
        logger.debug("Preset saved name=%s token=%r", self._key(name), compiled.to_token())
        return compiled

    def get(self, name: str) -> Filter | None:
        if not name:
            return None
        return self._presets.get(self._key(name))

    def remove(self, name: str) -> bool:
        if not name:
            return False
        return self._presets.pop(self._key(name), None) is not None

    # ---- persistence ----

    @classmethod
    def load(cls, path: str | Path) -> FilterPresets:
        """Read presets from a JSON object of name -> token. Bad files load empty."""
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text("utf-8"))
        except Exception:
            logger.exception("Failed to load filter presets from %s", path)
            return cls()

        if not isinstance(data, dict):
            logger.warning("Ignoring filter presets file %s: expected a JSON object", path)
            return cls()

        out = cls()
        for name, token in data.items():
            if not isinstance(name, str) or not isinstance(token, str) or not name.strip():
                continue
            out.add(name, token)
        logger.info("Loaded filter presets: %d from %s", len(out), path)
        return out

    def save(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {name: self._presets[name].to_token() for name in self.names()}
        tmp = path.with_suffix(".tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, path)
        with contextlib.suppress(Exception):
            os.chmod(path, 0o600)
        logger.info("Saved filter presets: %d to %s", len(self), path)
