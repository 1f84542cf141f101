"""Unwrapping of wrapping unsigned sequence numbers."""

from __future__ import annotations


class Unwrapper:
    """Turns wrapping 8, 16 or 32 bit counters into a continuous value."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Forget every value seen so far."""
        self.last_unwrapped = 0
        self.has_value = False
        self.last_value = 0

    def _unwrap(self, n: int, bits: int) -> int:
        wrap = 1 << bits
        if not 0 <= n < wrap:
            raise ValueError(f"{n} does not fit in {bits} unsigned bits")
        if not self.has_value:
            self.last_unwrapped = n
        else:
            last = self.last_value
            if last <= n:
                self.last_unwrapped += n - last
            else:
                self.last_unwrapped += wrap - (last - n)
            # a large forward step means the counter went back
            if n > last and n - last > wrap // 2:
                self.last_unwrapped -= wrap
        self.has_value = True
        self.last_value = n
        return self.last_unwrapped

    def unwrap_u8(self, n: int) -> int:
        """Unwrap an 8-bit counter value."""
        return self._unwrap(n, 8)

    def unwrap_u16(self, n: int) -> int:
        """Unwrap a 16-bit counter value."""
        return self._unwrap(n, 16)

    def unwrap_u32(self, n: int) -> int:
        """Unwrap a 32-bit counter value."""
        return self._unwrap(n, 32)