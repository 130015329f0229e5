"""Host runtime interface: the cycle counter and the CPU clock."""

from __future__ import annotations

import time as _time
from typing import Protocol


class HostRuntime(Protocol):
    """What the profiler needs from the simulation host."""

    @property
    def time(self) -> int:
        """Current cycle number."""

    def cpu_used(self) -> float:
        """Monotonic CPU usage reading in milliseconds."""


class ProcessHost:
    """Host backed by the process CPU clock with a manually advanced cycle counter."""

    def __init__(self, start_cycle: int = 0) -> None:
        self._cycle = start_cycle

    @property
    def time(self) -> int:
        return self._cycle

    def cpu_used(self) -> float:
        return _time.process_time() * 1000.0

    def advance(self, cycles: int = 1) -> int:
        """Move to the next cycle and return its number."""

        self._cycle += cycles
        return self._cycle
