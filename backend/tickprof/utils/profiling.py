"""Accumulates per-key call counts and CPU time into the profiler state."""

from __future__ import annotations

from ..models import AccumulatedStat
from ..storage import StateStore


class Recorder:
    """Writes timings (in host CPU milliseconds) into ``store.state.data``."""

    def __init__(self, store: StateStore) -> None:
        self.store = store

    def record(self, key: str, elapsed: float) -> None:
        """Count one call of ``key`` that took ``elapsed`` milliseconds."""

        data = self.store.state.data
        stat = data.get(key)
        if stat is None:
            stat = data[key] = AccumulatedStat()
        stat.calls += 1
        stat.time += elapsed
