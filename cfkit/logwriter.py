"""Single-destination log writer for the terminal or a size-capped file."""

from __future__ import annotations

import contextlib
import enum
import os
import sys
import threading
from typing import IO, Iterator, Optional

from cfkit.logger import LogLevel, format_record

DEFAULT_FILE_SIZE_MB = 1
_BYTES_PER_MB = 1_000_000

_COLORED = os.name != "nt"
_COLORS = {
    LogLevel.INFO: "\033[32;1m",
    LogLevel.WARNING: "\033[33;1m",
    LogLevel.ERROR: "\033[31;1m",
    LogLevel.FATAL: "\033[31;1m",
}
_RESET = "\033[0m"

_NAMES = {
    LogLevel.DEBUG: "D",
    LogLevel.INFO: "I",
    LogLevel.WARNING: "W",
    LogLevel.ERROR: "E",
    LogLevel.FATAL: "F",
}


class LogTarget(enum.Enum):
    """Where a writer sends its records."""

    FILE = "file"
    TERMINAL = "terminal"
    USERDEF = "userdef"


def _level_name(level: int) -> str:
    try:
        return _NAMES.get(LogLevel(level), "U")
    except ValueError:
        return "U"


class LogWriter:
    """Writes records to stdout or to a file that restarts when it grows too big."""

    def __init__(self) -> None:
        self.target = LogTarget.TERMINAL
        self.stream: IO[str] = sys.stdout
        self.path: Optional[str] = None
        self.level: int = LogLevel.DEBUG
        self.color = False
        self.uselock = False
        self.file_size = DEFAULT_FILE_SIZE_MB
        self._lock = threading.RLock()

    @contextlib.contextmanager
    def _guard(self) -> Iterator[None]:
        if self.uselock:
            with self._lock:
                yield
        else:
            yield

    def _close_file(self) -> None:
        if self.target is LogTarget.FILE:
            self.stream.close()

    def to_file(self, path: str) -> None:
        """Append records to the file at ``path`` from now on."""
        with self._guard():
            stream = open(path, "a+", encoding="utf-8")
            self._close_file()
            self.stream = stream
            self.target = LogTarget.FILE
            self.path = os.fspath(path)

    def to_terminal(self) -> None:
        """Write records to standard output from now on."""
        with self._guard():
            self._close_file()
            self.stream = sys.stdout
            self.target = LogTarget.TERMINAL
            self.path = None

    def _format(self, filename: str, line: int, func: str, level: int, msg: str) -> str:
        text = format_record(
            os.getpid(), threading.get_native_id(), filename, line, func,
            _level_name(level), msg,
        )
        if _COLORED and self.target is LogTarget.TERMINAL and self.color:
            prefix = _COLORS.get(level)
            if prefix is not None:
                text = f"{prefix}{text[:-1]}{_RESET}\n"
        return text

    def output(self, filename: str, line: int, func: str, level: int, msg: str) -> None:
        """Write one record if ``level`` is not below the writer's level."""
        with self._guard():
            if (
                self.target is LogTarget.FILE
                and len(msg) + self.stream.tell() > self.file_size * _BYTES_PER_MB
            ):
                self.stream.close()
                self.stream = open(self.path, "w+", encoding="utf-8")
            if level < self.level:
                return
            self.stream.write(self._format(filename, line, func, level, msg))
            if self.target is LogTarget.FILE:
                self.stream.flush()

    def set_level(self, level: int) -> None:
        """Drop records below ``level`` from now on."""
        self.level = level

    def set_color(self, color: bool) -> None:
        """Colour terminal records by level."""
        self.color = bool(color)

    def use_lock(self, flag: bool) -> None:
        """Serialise writes with a lock; once on, it stays on."""
        if self.uselock:
            return
        self.uselock = bool(flag)

    def set_file_size(self, size: int) -> None:
        """Set the size in megabytes at which the log file restarts."""
        if size < 0:
            raise ValueError("file size must not be negative")
        with self._guard():
            self.file_size = size

    def close(self) -> None:
        """Close the log file, if any, and fall back to the terminal."""
        with self._guard():
            self._close_file()
            self.target = LogTarget.TERMINAL
            self.stream = sys.stdout
            self.path = None

    def __enter__(self) -> "LogWriter":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()