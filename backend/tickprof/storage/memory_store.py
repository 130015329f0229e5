"""In-memory holder for the single profiler state record."""

from __future__ import annotations

from typing import Optional, Protocol

from ..models import ProfilerState


class StateStore(Protocol):
    state: ProfilerState

    def reset(self) -> ProfilerState: ...

    def flush(self) -> None: ...


class MemoryStateStore:
    """Keeps the profiler state for the lifetime of the process."""

    def __init__(self, state: Optional[ProfilerState] = None) -> None:
        self.state = state if state is not None else ProfilerState()

    def reset(self) -> ProfilerState:
        """Replace the state with a fresh, empty record and return it."""

        self.state = ProfilerState()
        return self.state

    def flush(self) -> None:
        """Nothing to persist."""
