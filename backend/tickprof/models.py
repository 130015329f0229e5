"""Pydantic models for accumulated profiler state and report rows."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class ProfilerStatus(str, Enum):
    """Whether a measurement window is currently open."""

    RUNNING = "running"
    STOPPED = "stopped"


class AccumulatedStat(BaseModel):
    """Call count and cumulative CPU time for one instrumented member."""

    calls: int = Field(default=0, ge=0)
    time: float = Field(default=0.0, description="Cumulative CPU time in milliseconds")


class ProfilerState(BaseModel):
    """Everything the profiler persists between cycles.

    ``start`` is set exactly while the profiler is running. ``total`` holds the
    ticks of windows that were already closed with ``stop``.
    """

    data: Dict[str, AccumulatedStat] = Field(default_factory=dict)
    start: Optional[int] = Field(default=None, description="Cycle the current window began")
    end: Optional[int] = Field(default=None, description="Cycle at which the window auto-finishes")
    total: int = Field(default=0, ge=0, description="Ticks banked from previous windows")

    @property
    def running(self) -> bool:
        return self.start is not None


class OutputRow(BaseModel):
    """Derived per-key metrics for a single report. Never persisted."""

    name: str
    calls: int
    cpu_per_call: float
    calls_per_tick: float
    cpu_per_tick: float
