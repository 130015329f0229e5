"""Profiler state persisted as a JSON document between runs."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ..models import ProfilerState
from .memory_store import MemoryStateStore

LOGGER = logging.getLogger(__name__)


class JsonStateStore(MemoryStateStore):
    """Loads the state from ``path`` on construction and writes it back on ``flush``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> ProfilerState:
        if not self.path.exists():
            LOGGER.debug("No profiler state at %s, starting fresh", self.path)
            return ProfilerState()
        try:
            return ProfilerState.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as exc:
            LOGGER.warning("Discarding unreadable profiler state at %s: %s", self.path, exc)
            return ProfilerState()

    def flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(self.state.model_dump_json(indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
        LOGGER.debug("Profiler state written to %s", self.path)
