"""Profiler lifecycle service."""

from .profiler import Profiler, init_profiler

__all__ = ["Profiler", "init_profiler"]
