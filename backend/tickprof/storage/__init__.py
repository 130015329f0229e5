"""Persisted profiler state stores."""

from .json_store import JsonStateStore
from .memory_store import MemoryStateStore, StateStore

__all__ = ["JsonStateStore", "MemoryStateStore", "StateStore"]
