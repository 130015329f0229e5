"""Start/stop lifecycle, console commands, and wiring of the instrumentation layer."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from ..config import Settings, get_settings
from ..host import HostRuntime
from ..instrumentation import Instrumenter, RegistryEntry, install_all
from ..models import ProfilerState, ProfilerStatus
from ..reporting import build_rows, render_report, total_ticks
from ..storage import JsonStateStore, MemoryStateStore, StateStore
from ..utils import Recorder

LOGGER = logging.getLogger(__name__)
REPORT_LOGGER = logging.getLogger("tickprof.report")

HELP_TEXT = (
    "Profiler.start() - Starts the profiler\n"
    "Profiler.stop() - Stops/Pauses the profiler\n"
    "Profiler.status() - Returns whether is profiler is currently running or not\n"
    "Profiler.output() - Pretty-prints the collected profiler data to the console\n"
    "Profiler.finish() - stops profiling, outputs, and then clears the memory.\n"
    "Profiler.clear() - clears profile memory and maintains the profiling state (started or stopped).\n"
    "Profiler.end_tick() - place at the end of your main loop to automatically finish profiling and output.\n"
)


class Profiler:
    """Console-style API over the persisted profiler state.

    The profiler is *enabled* while ``state.start`` is set. Wrapped methods
    check :meth:`is_enabled` on every call.
    """

    def __init__(
        self,
        host: HostRuntime,
        store: Optional[StateStore] = None,
        settings: Optional[Settings] = None,
        sink: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.host = host
        self.store = store or MemoryStateStore()
        self.settings = settings or get_settings()
        self.sink = sink or REPORT_LOGGER.info
        self.recorder = Recorder(self.store)
        self.instrumenter = Instrumenter(
            self.recorder,
            host,
            self.is_enabled,
            gate_accessors=self.settings.gate_accessors,
        )

    @property
    def state(self) -> ProfilerState:
        return self.store.state

    @property
    def run_state(self) -> ProfilerStatus:
        return ProfilerStatus.RUNNING if self.is_enabled() else ProfilerStatus.STOPPED

    def is_enabled(self) -> bool:
        return self.store.state.running

    def clear(self) -> str:
        running = self.is_enabled()
        state = self.store.reset()
        if running:
            state.start = self.host.time
        LOGGER.debug("Profiler data cleared (running=%s)", running)
        return "Profiler Memory cleared"

    def output(self) -> str:
        ticks = total_ticks(self.state, self.host.time)
        self.sink(render_report(build_rows(self.state, ticks), ticks))
        return "Done"

    def start(self, cycles: Optional[int] = None) -> str:
        state = self.state
        state.start = self.host.time
        if cycles:
            state.end = self.host.time + cycles
            LOGGER.info("Profiler started at tick %s for %s ticks", state.start, cycles)
            return f"Profiler started, running for {cycles} ticks."
        state.end = None
        LOGGER.info("Profiler started at tick %s", state.start)
        return "Profiler started"

    def status(self) -> str:
        if self.is_enabled():
            return "Profiler is running"
        return "Profiler is stopped"

    def end_tick(self) -> None:
        """Call once at the end of every cycle."""

        state = self.state
        if self.is_enabled() and state.end is not None and state.end <= self.host.time:
            LOGGER.info("Profiling window expired at tick %s", self.host.time)
            self.finish()
        self.store.flush()

    def stop(self) -> Optional[str]:
        if not self.is_enabled():
            return None
        state = self.state
        state.total += self.host.time - state.start
        state.start = None
        state.end = None
        LOGGER.info("Profiler stopped, %s ticks banked", state.total)
        return "Profiler stopped"

    def finish(self) -> None:
        """Report once and reset. Leaves the profiler stopped."""

        state = self.state
        if self.settings.bank_on_finish and state.running:
            state.total += self.host.time - state.start
        state.start = None
        state.end = None
        self.output()
        self.clear()

    def help(self) -> str:
        return HELP_TEXT + self.status()

    def profile(self, target: Any) -> Any:
        """Decorator registering a class (all own members) or a single function."""

        if not self.settings.enabled:
            return target
        if isinstance(target, type):
            install_all(self.instrumenter, [RegistryEntry(target, target.__name__)])
            return target
        *scope, name = target.__qualname__.split(".")
        if scope and scope[-1] != "<locals>":
            owner = scope[-1]
        else:
            owner = getattr(target, "__module__", "") or ""
        return self.instrumenter.wrap_function(target, f"{owner}:{name}")


def init_profiler(
    host: HostRuntime,
    registry: Iterable[RegistryEntry] = (),
    settings: Optional[Settings] = None,
    store: Optional[StateStore] = None,
    sink: Optional[Callable[[str], None]] = None,
) -> Profiler:
    """Build a profiler and, when enabled by configuration, instrument ``registry``."""

    settings = settings or get_settings()
    if store is None:
        store = JsonStateStore(settings.state_path) if settings.state_path else MemoryStateStore()
    profiler = Profiler(host, store=store, settings=settings, sink=sink)
    if settings.enabled:
        install_all(profiler.instrumenter, registry)
    else:
        LOGGER.info("Instrumentation disabled by configuration")
    return profiler
