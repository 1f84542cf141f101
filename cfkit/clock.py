"""Clocks reading steady or wall time in ns, ms and s."""

from __future__ import annotations

import enum
import time
from typing import Optional


class ClockKind(enum.Enum):
    """Time source of a clock."""

    STEADY = "steady"
    STEADY_HIGH = "steady_high"
    SYSTEM = "system"


class Clock:
    """A clock reading one time source, shifted by ``offset_ns``."""

    def __init__(self, kind: ClockKind = ClockKind.SYSTEM, offset_ns: int = 0) -> None:
        self.kind = ClockKind(kind)
        self.offset_ns = offset_ns

    def current_ns(self) -> int:
        """Current time in nanoseconds."""
        if self.kind in (ClockKind.STEADY, ClockKind.STEADY_HIGH):
            now = time.monotonic_ns()
        else:
            now = time.time_ns()
        return now + self.offset_ns

    def current_ms(self) -> int:
        """Current time in milliseconds."""
        return self.current_ns() // 1_000_000

    def current_s(self) -> int:
        """Current time in seconds."""
        return self.current_ns() // 1_000_000_000

    def __repr__(self) -> str:
        return f"Clock({self.kind!r}, offset_ns={self.offset_ns})"


_global: Optional[Clock] = None
_steady: Optional[Clock] = None
_steady_high: Optional[Clock] = None
_system: Optional[Clock] = None


def global_clock() -> Clock:
    """Return the global clock, a steady clock unless replaced."""
    global _global
    if _global is None:
        _global = Clock(ClockKind.STEADY)
    return _global


def set_global_clock(clock: Optional[Clock]) -> Optional[Clock]:
    """Replace the global clock and return the previous one.

    None restores the default on next use.
    """
    global _global
    if clock is not None and not isinstance(clock, Clock):
        raise TypeError(f"expected a Clock, got {type(clock).__name__}")
    previous = _global
    _global = clock
    return previous


def steady_clock() -> Clock:
    """Return the shared steady clock."""
    global _steady
    if _steady is None:
        _steady = Clock(ClockKind.STEADY)
    return _steady


def steady_high_clock() -> Clock:
    """Return the shared high-resolution steady clock."""
    global _steady_high
    if _steady_high is None:
        _steady_high = Clock(ClockKind.STEADY_HIGH)
    return _steady_high


def system_clock() -> Clock:
    """Return the shared wall clock."""
    global _system
    if _system is None:
        _system = Clock(ClockKind.SYSTEM)
    return _system