"""Utility helpers for the profiler."""

from .profiling import Recorder

__all__ = ["Recorder"]
