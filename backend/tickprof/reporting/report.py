"""Ranks accumulated statistics and renders them as a fixed-width table."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Sequence

from ..models import OutputRow, ProfilerState

COLUMN_WIDTH = 12


def total_ticks(state: ProfilerState, current_cycle: int) -> int:
    """Banked ticks plus the ticks of the window still open, if any."""

    ticks = state.total
    if state.running:
        ticks += current_cycle - state.start
    return ticks


def build_rows(state: ProfilerState, ticks: int) -> List[OutputRow]:
    """Return one row per key, most CPU per tick first."""

    rows = [
        OutputRow(
            name=key,
            calls=stat.calls,
            cpu_per_call=_divide(stat.time, stat.calls),
            calls_per_tick=_divide(stat.calls, ticks),
            cpu_per_tick=_divide(stat.time, ticks),
        )
        for key, stat in state.data.items()
    ]
    rows.sort(key=lambda row: row.cpu_per_tick, reverse=True)
    return rows


def render_report(rows: Sequence[OutputRow], ticks: int) -> str:
    total_cpu = sum(row.cpu_per_tick for row in rows)
    name_width = max((len(row.name) for row in rows), default=len("Function")) + 2

    lines = [
        "Function".ljust(name_width)
        + "Tot Calls".rjust(COLUMN_WIDTH)
        + "CPU/Call".rjust(COLUMN_WIDTH)
        + "Calls/Tick".rjust(COLUMN_WIDTH)
        + "CPU/Tick".rjust(COLUMN_WIDTH)
        + "% of Tot".rjust(COLUMN_WIDTH)
    ]
    for row in rows:
        share = _divide(row.cpu_per_tick, total_cpu) * 100
        lines.append(
            row.name.ljust(name_width)
            + f"{row.calls}".rjust(COLUMN_WIDTH)
            + f"{_fixed(row.cpu_per_call, 2)}ms".rjust(COLUMN_WIDTH)
            + _fixed(row.calls_per_tick, 2).rjust(COLUMN_WIDTH)
            + f"{_fixed(row.cpu_per_tick, 2)}ms".rjust(COLUMN_WIDTH)
            + f"{_fixed(share, 0)} %".rjust(COLUMN_WIDTH)
        )
    lines.append(f"{ticks} total ticks measured\t\t\t{_fixed(total_cpu, 2)} average CPU profiled per tick")
    return "\n".join(lines)


def _fixed(value: float, places: int) -> str:
    """Format with ``places`` decimals, rounding halves away from zero."""

    if not math.isfinite(value):
        return f"{value}"
    exponent = Decimal(1).scaleb(-places)
    return f"{Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)}"


def _divide(numerator: float, denominator: float) -> float:
    # IEEE semantics instead of ZeroDivisionError: x/0 -> +-inf, 0/0 -> nan.
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)
