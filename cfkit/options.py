"""Parsing of command-line options one at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence


@dataclass
class Option:
    """One parsed option.

    ``is_multi`` marks a group of short flags such as ``-abc``, whose
    letters are all held in ``name``.
    """

    name: str
    arg: Optional[str] = None
    has_arg: bool = False
    is_short: bool = False
    is_multi: bool = False


def _is_param(s: str) -> bool:
    return len(s) > 0 and s[0] != "-"


def _is_short(s: str) -> bool:
    return len(s) == 2 and s[0] == "-" and s[1] != "-"


def _is_long(s: str) -> bool:
    return len(s) > 2 and s.startswith("--") and s[2] != "-"


def _is_multi(s: str) -> bool:
    return len(s) > 2 and s[0] == "-" and s[1] != "-"


def parse_option(argv: Sequence[str], pos: int = 0) -> tuple[Option, int]:
    """Parse the option at ``pos`` (0 means the first after the program name).

    Returns the option and the position of the next one. Raises EOFError
    when ``pos`` is past the end and ValueError when the word is not an
    option.
    """
    if not argv:
        raise ValueError("argument list is empty")
    if pos >= len(argv):
        raise EOFError("no more options")
    if len(argv) <= 1:
        raise ValueError("no arguments after the program name")
    if pos == 0:
        pos = 1
    word = argv[pos]

    if _is_short(word):
        option = Option(name=word[1], is_short=True)
        if pos + 1 < len(argv) and _is_param(argv[pos + 1]):
            option.arg = argv[pos + 1]
            option.has_arg = True
            pos += 1
    elif _is_long(word):
        body = word[2:]
        name, sep, arg = body.partition("=")
        if sep:
            option = Option(name=name, arg=arg, has_arg=True)
        else:
            option = Option(name=body)
    elif _is_multi(word):
        option = Option(name=word[1:], is_short=True, is_multi=True)
    else:
        raise ValueError(f"{word!r} is not an option")
    return option, pos + 1


def iter_options(argv: Sequence[str]) -> Iterator[Option]:
    """Yield every option of ``argv``, skipping the program name."""
    if len(argv) <= 1:
        return
    pos = 0
    while pos < len(argv):
        option, pos = parse_option(argv, pos)
        yield option