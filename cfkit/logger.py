"""Logger that fans formatted records out to a list of sinks."""

from __future__ import annotations

import enum
import os
import threading
import time
from typing import Any, Callable, IO, Optional

RECORD_FORMAT = "[{ts}][P({pid})|T({tid})][{level}][{filename}:{line}, {func}] {msg}\n"


class LogLevel(enum.IntEnum):
    """Severity of a log record."""

    NOTSET = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5
    NONE = 6


_LEVEL_NAMES = {
    LogLevel.NOTSET: "_",
    LogLevel.DEBUG: "D",
    LogLevel.INFO: "I",
    LogLevel.WARNING: "W",
    LogLevel.ERROR: "E",
    LogLevel.FATAL: "F",
}


def level_name(level: int) -> Optional[str]:
    """Return the one-letter name of a level, or None for levels past FATAL."""
    try:
        return _LEVEL_NAMES.get(LogLevel(level))
    except ValueError:
        return None


def format_record(
    pid: int,
    tid: int,
    filename: str,
    line: int,
    func: str,
    level_label: str,
    msg: str,
) -> str:
    """Build one log line with the current local time."""
    return RECORD_FORMAT.format(
        ts=time.ctime(),
        pid=pid,
        tid=tid,
        level=level_label,
        filename=filename,
        line=line,
        func=func,
        msg=msg,
    )


class Sink:
    """Destination of log records."""

    def write(
        self,
        pid: int,
        tid: int,
        filename: str,
        line: int,
        func: str,
        level: int,
        msg: str,
    ) -> None:
        """Write one record."""
        raise NotImplementedError

    def close(self) -> None:
        """Release whatever the sink holds."""


class FileSink(Sink):
    """Writes records as text lines to a stream."""

    type = "file"

    def __init__(
        self,
        stream: IO[str],
        on_close: Optional[Callable[[IO[str]], Any]] = None,
    ) -> None:
        self.stream = stream
        self.on_close = on_close

    def write(
        self,
        pid: int,
        tid: int,
        filename: str,
        line: int,
        func: str,
        level: int,
        msg: str,
    ) -> None:
        """Write one record; levels outside NOTSET..FATAL are dropped."""
        label = level_name(level)
        if label is None:
            return
        self.stream.write(format_record(pid, tid, filename, line, func, label, msg))

    def close(self) -> None:
        """Hand the stream to ``on_close`` if one was given."""
        if self.on_close is not None:
            self.on_close(self.stream)


class Logger:
    """Sends every record at or above its level to all of its sinks."""

    def __init__(self) -> None:
        self.sinks: list[Sink] = []
        self.level: int = LogLevel.NOTSET

    def write(
        self,
        filename: str,
        line: int,
        func: str,
        level: int,
        msg: str,
    ) -> None:
        """Log ``msg`` as coming from ``filename:line`` in ``func``."""
        if level < self.level:
            return
        pid = os.getpid()
        tid = threading.get_native_id()
        for sink in self.sinks:
            sink.write(pid, tid, filename, line, func, level, msg)

    def set_level(self, level: int) -> None:
        """Drop records below ``level`` from now on."""
        self.level = level

    def add_sink(self, sink: Sink) -> None:
        """Append a sink."""
        self.sinks.append(sink)

    def close(self) -> None:
        """Close and forget every sink."""
        sinks, self.sinks = self.sinks, []
        for sink in sinks:
            sink.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


_default: Optional[Logger] = None


def default_logger() -> Logger:
    """Return the shared process-wide logger."""
    global _default
    if _default is None:
        _default = Logger()
    return _default