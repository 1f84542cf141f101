"""Auto- or manual-reset event for thread signalling."""

from __future__ import annotations

import threading


class ResetEvent:
    """An event that wakes waiters; auto-reset events wake one wait per set."""

    def __init__(self, manual_reset: bool = False, signaled: bool = False) -> None:
        self.manual_reset = manual_reset
        self._signaled = signaled
        self._cond = threading.Condition()

    @property
    def is_set(self) -> bool:
        """Whether the event is signaled."""
        with self._cond:
            return self._signaled

    def set(self) -> None:
        """Signal the event and wake all waiters."""
        with self._cond:
            self._signaled = True
            self._cond.notify_all()

    def reset(self) -> None:
        """Clear the signal."""
        with self._cond:
            self._signaled = False

    def wait(self, timeout_ms: int = -1) -> bool:
        """Wait for the signal; -1 waits forever. Return False on timeout."""
        timeout = None if timeout_ms == -1 else max(timeout_ms, 0) / 1000.0
        with self._cond:
            if not self._cond.wait_for(lambda: self._signaled, timeout):
                return False
            if not self.manual_reset:
                self._signaled = False
            return True