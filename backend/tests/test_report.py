import math

import pytest

from tickprof.models import AccumulatedStat, ProfilerState
from tickprof.reporting import build_rows, render_report, total_ticks


def make_state(**stats) -> ProfilerState:
    return ProfilerState(
        data={key.replace("__", ":"): AccumulatedStat(calls=c, time=t) for key, (c, t) in stats.items()},
        total=20,
    )


def test_row_metrics():
    rows = build_rows(make_state(Room__find=(10, 100.0)), 20)

    assert len(rows) == 1
    row = rows[0]
    assert row.name == "Room:find"
    assert row.calls == 10
    assert row.cpu_per_call == pytest.approx(10.0)
    assert row.calls_per_tick == pytest.approx(0.5)
    assert row.cpu_per_tick == pytest.approx(5.0)


def test_rows_sorted_by_cpu_per_tick_descending():
    state = make_state(A__run=(1, 30.0), B__run=(1, 50.0), C__run=(1, 40.0))

    assert [row.name for row in build_rows(state, 10)] == ["B:run", "C:run", "A:run"]


def test_total_ticks_includes_open_window():
    state = ProfilerState(total=7, start=100)

    assert total_ticks(state, 105) == 12
    state.start = None
    assert total_ticks(state, 105) == 7


def test_zero_ticks_yield_non_finite_metrics():
    rows = build_rows(make_state(Room__find=(2, 4.0), Flag__remove=(0, 0.0)), 0)
    by_name = {row.name: row for row in rows}

    assert math.isinf(by_name["Room:find"].cpu_per_tick)
    assert math.isinf(by_name["Room:find"].calls_per_tick)
    assert math.isnan(by_name["Flag:remove"].cpu_per_call)
    assert math.isnan(by_name["Flag:remove"].cpu_per_tick)


def test_render_layout():
    ticks = 20
    text = render_report(build_rows(make_state(Room__find=(10, 100.0), Creep__move=(5, 100.0)), ticks), ticks)
    lines = text.split("\n")

    # longest name is "Creep:move" (10 chars) + 2 padding, then five 12-wide columns
    header, first, second, footer = lines
    assert header == "Function    " + "   Tot Calls" + "    CPU/Call" + "  Calls/Tick" + "    CPU/Tick" + "    % of Tot"
    assert len(first) == 12 + 5 * 12
    assert first.split() == ["Room:find", "10", "10.00ms", "0.50", "5.00ms", "50", "%"]
    assert second.split() == ["Creep:move", "5", "20.00ms", "0.25", "5.00ms", "50", "%"]
    assert footer == "20 total ticks measured\t\t\t10.00 average CPU profiled per tick"


def test_render_empty_report():
    text = render_report([], 5)

    lines = text.split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("Function  ")
    assert lines[1] == "5 total ticks measured\t\t\t0.00 average CPU profiled per tick"


def test_render_rounds_halves_up():
    state = ProfilerState(
        data={
            "Creep:move": AccumulatedStat(calls=8, time=7.0),
            "Flag:remove": AccumulatedStat(calls=8, time=1.0),
        }
    )
    text = render_report(build_rows(state, 1), 1)
    lines = text.split("\n")

    assert lines[1].split() == ["Creep:move", "8", "0.88ms", "8.00", "7.00ms", "88", "%"]
    assert lines[2].split() == ["Flag:remove", "8", "0.13ms", "8.00", "1.00ms", "13", "%"]


def test_render_keeps_non_finite_values_readable():
    state = ProfilerState(data={"Room:find": AccumulatedStat(calls=2, time=4.0)})
    text = render_report(build_rows(state, 0), 0)

    assert text.split("\n")[1].split() == ["Room:find", "2", "2.00ms", "inf", "infms", "nan", "%"]
