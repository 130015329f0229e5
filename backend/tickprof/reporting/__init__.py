"""Report generation."""

from .report import build_rows, render_report, total_ticks

__all__ = ["build_rows", "render_report", "total_ticks"]
