import time

import pytest

from cfkit import clock as clk
from cfkit.clock import Clock, ClockKind


@pytest.fixture
def restore_global():
    yield
    clk.set_global_clock(None)


def test_steady_is_monotonic():
    c = clk.steady_clock()
    readings = [c.current_ns() for _ in range(50)]
    assert readings == sorted(readings)


def test_system_matches_wall_time():
    before = time.time_ns()
    now = clk.system_clock().current_ns()
    after = time.time_ns()
    assert before <= now <= after


def test_units_agree():
    c = Clock(ClockKind.SYSTEM)
    ns = c.current_ns()
    ms = c.current_ms()
    s = c.current_s()
    assert ms >= ns // 1_000_000
    assert ms - ns // 1_000_000 < 1000
    assert s >= ns // 1_000_000_000
    assert s - ns // 1_000_000_000 <= 1


def test_offset_shifts_reading():
    offset = 10**15
    before = time.time_ns()
    shifted = Clock(ClockKind.SYSTEM, offset).current_ns()
    assert shifted >= before + offset


def test_shared_clocks_are_singletons():
    assert clk.steady_clock() is clk.steady_clock()
    assert clk.system_clock() is clk.system_clock()
    assert clk.steady_high_clock() is clk.steady_high_clock()
    assert clk.steady_high_clock().kind is ClockKind.STEADY_HIGH
    assert clk.system_clock().kind is ClockKind.SYSTEM


def test_global_defaults_to_steady(restore_global):
    clk.set_global_clock(None)
    assert clk.global_clock().kind is ClockKind.STEADY


def test_set_global_clock(restore_global):
    mine = Clock(ClockKind.SYSTEM, offset_ns=5)
    clk.set_global_clock(mine)
    assert clk.global_clock() is mine


def test_invalid_kind():
    with pytest.raises(ValueError):
        Clock("sundial")