"""Error numbers that pack a module id and a per-module code into one integer.

Layout: reserved (10 bits) | module (6 bits) | code (16 bits).
"""

from __future__ import annotations

import enum
from typing import Callable, Optional

CODE_BITS = 16
MODULE_BITS = 6
MODULE_START = 0
MODULE_MAX = 1 << MODULE_BITS
CODE_MAX = 1 << CODE_BITS
CODE_MASK = CODE_MAX - 1
MODULE_MASK = MODULE_MAX - 1

StrerrFn = Callable[[int], str]


def make_errno(module: int, code: int) -> int:
    """Combine a module id and a code into one error number."""
    return (module << CODE_BITS) | code


def error_module(err: int) -> int:
    """Return the module id held in an error number."""
    return (err >> CODE_BITS) & MODULE_MASK


def error_code(err: int) -> int:
    """Return the per-module code held in an error number."""
    return err & CODE_MASK


class ErrorCode(enum.IntEnum):
    """Common error numbers of module 0."""

    OK = make_errno(MODULE_START, 0)
    NOK = make_errno(MODULE_START, 1)
    PARAM = make_errno(MODULE_START, 2)
    NULLPTR = make_errno(MODULE_START, 3)
    NOTFOUND = make_errno(MODULE_START, 4)
    FULL = make_errno(MODULE_START, 5)
    EMPTY = make_errno(MODULE_START, 6)
    TOOBIG = make_errno(MODULE_START, 7)
    TOOSHORT = make_errno(MODULE_START, 8)
    FOPEN = make_errno(MODULE_START, 9)
    FCLOSE = make_errno(MODULE_START, 10)
    FWRITE = make_errno(MODULE_START, 11)
    EOF = make_errno(MODULE_START, 12)
    FREAD = make_errno(MODULE_START, 13)
    MALLOC = make_errno(MODULE_START, 14)
    MFREE = make_errno(MODULE_START, 15)
    DSO_OPEN = make_errno(MODULE_START, 16)
    DSO_GETSYM = make_errno(MODULE_START, 17)
    SELECT_TOUT = make_errno(MODULE_START, 18)
    BAD_ID = make_errno(MODULE_START, 19)


_DESCRIPTIONS = {
    ErrorCode.OK: "OK.",
    ErrorCode.NOK: "Not OK.",
    ErrorCode.PARAM: "Invalid params.",
    ErrorCode.NULLPTR: "Pointer is NULL.",
    ErrorCode.NOTFOUND: "Not found.",
    ErrorCode.FULL: "Full.",
    ErrorCode.EMPTY: "Empty",
    ErrorCode.TOOBIG: "Too big.",
    ErrorCode.TOOSHORT: "Too short.",
    ErrorCode.FOPEN: "fopen error.",
    ErrorCode.FCLOSE: "fclose error.",
    ErrorCode.FWRITE: "fwrite error.",
    ErrorCode.EOF: "end of file.",
    ErrorCode.FREAD: "fread error.",
    ErrorCode.MALLOC: "Memory allocate error.",
    ErrorCode.MFREE: "Memory free error.",
    ErrorCode.DSO_OPEN: "dso open error.",
    ErrorCode.DSO_GETSYM: "fail to get dso symbol.",
    ErrorCode.SELECT_TOUT: "select timeout.",
    ErrorCode.BAD_ID: "bad id",
}


def _common_strerr(err: int) -> str:
    desc = _DESCRIPTIONS.get(err)
    if desc is None:
        return "Errno NOT FOUND"
    return f"{desc} (CF_E{ErrorCode(err).name})"


_handlers: list[Optional[StrerrFn]] = [_common_strerr] + [None] * (MODULE_MAX - 1)


class CfError(Exception):
    """An error carrying an error number."""

    def __init__(self, errno: int, message: Optional[str] = None) -> None:
        self.errno = int(errno)
        super().__init__(message if message is not None else strerror(self.errno))


def register(module: int, fn: StrerrFn) -> None:
    """Register the function that describes error numbers of a module."""
    if not 0 <= module < MODULE_MAX or fn is None:
        raise CfError(ErrorCode.BAD_ID)
    _handlers[module] = fn


def strerror(err: int) -> str:
    """Describe an error number."""
    handler = _handlers[error_module(err) - MODULE_START]
    if handler is None:
        return "Module NOT REGISTERED!"
    return handler(err)