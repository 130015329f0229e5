"""Pytest configuration for backend tests."""

import sys
from pathlib import Path

import pytest

def ensure_app_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))

ensure_app_on_path()

from tickprof.config import Settings  # noqa: E402
from tickprof.services import Profiler  # noqa: E402


class FakeHost:
    """Host with a settable cycle counter and a CPU clock that advances ``step`` ms per read."""

    def __init__(self, time: int = 0, step: float = 1.5) -> None:
        self.time = time
        self.step = step
        self.reads = 0
        self._cpu = 0.0

    def cpu_used(self) -> float:
        self.reads += 1
        self._cpu += self.step
        return self._cpu


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def reports() -> list:
    return []


@pytest.fixture
def profiler(host, reports) -> Profiler:
    return Profiler(host, settings=Settings(enabled=True), sink=reports.append)
