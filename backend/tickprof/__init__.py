"""Call-timing instrumentation for tick-based simulation hosts."""

from .config import Settings, get_settings
from .host import HostRuntime, ProcessHost
from .instrumentation import RegistryEntry
from .models import AccumulatedStat, OutputRow, ProfilerState, ProfilerStatus
from .services import Profiler, init_profiler

__all__ = [
    "AccumulatedStat",
    "HostRuntime",
    "OutputRow",
    "ProcessHost",
    "Profiler",
    "ProfilerState",
    "ProfilerStatus",
    "RegistryEntry",
    "Settings",
    "get_settings",
    "init_profiler",
]
