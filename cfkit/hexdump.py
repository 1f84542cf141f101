"""Hex rendering of memory for debugging."""

from __future__ import annotations


def mem2hex(data: bytes) -> str:
    """Render bytes as hex: groups of 4 bytes, 16 bytes per line.

    Each byte is written as an upper-case hex number padded with spaces
    to a width of two.
    """
    parts: list[str] = []
    for count, byte in enumerate(bytes(data)):
        if count:
            if count % 16 == 0:
                parts.append("\n")
            elif count % 4 == 0:
                parts.append(" ")
        parts.append(f"{byte:2X}")
    return "".join(parts)