"""Tree of named commands driven by argument lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Sequence

from cfkit.errors import CfError, ErrorCode

GROUP_DESC = "<GROUP>No descriptions."
NO_DESC = "No informations"

OutputFn = Callable[[Any, str], None]
CommandFn = Callable[["Cli", Any, list], Any]

_SPACES = " \t\n\r\f\v"


def _print_output(sess: Any, text: str) -> None:
    print(text, end="")


@dataclass
class Command:
    """A node of the command tree.

    ``func`` is called as ``func(cli, sess, args)`` with the words that
    follow the command; a command without ``func`` only groups others.
    """

    name: str
    desc: Optional[str] = None
    func: Optional[CommandFn] = None
    children: dict[str, "Command"] = field(default_factory=dict)


def _help_command(cli: "Cli", sess: Any, args: list) -> None:
    cli.help(args, sess)


class Cli:
    """Dispatches argument lists to registered commands."""

    version_info = "cli\n"

    def __init__(self, output: Optional[OutputFn] = None) -> None:
        self.output: OutputFn = output if output is not None else _print_output
        self.root = Command("?", "", _help_command)

    def _walk(self, argv: Sequence[str]) -> tuple[Command, int]:
        node = self.root
        matched = 0
        for word in argv:
            child = node.children.get(word)
            if child is None:
                break
            node = child
            matched += 1
        return node, matched

    def register(self, cmd: str, desc: Optional[str], func: Optional[CommandFn]) -> Command:
        """Register a command given as space-separated words.

        Missing intermediate commands are created as groups.
        """
        words = cmd.split()
        if not words:
            raise ValueError("command must hold at least one word")
        node = self.root
        for word in words:
            child = node.children.get(word)
            if child is None:
                child = Command(word, GROUP_DESC)
                node.children[word] = child
            node = child
        node.func = func
        node.desc = desc
        return node

    def input(self, argv: Sequence[str], sess: Any = None) -> Any:
        """Run the command named by the leading words of ``argv``.

        Returns what the command returns. A trailing ``?`` after the
        matched words shows help instead. Raises CfError when no command
        fits.
        """
        argv = list(argv)
        node, matched = self._walk(argv)
        if matched < len(argv) and argv[matched] == "?":
            self.help(argv[:matched], sess)
            return None
        if node is self.root:
            if argv:
                self.output(sess, "Command Not Fit!\n")
                raise CfError(ErrorCode.NOK, "Command Not Fit!")
            self.output(sess, self.version_info)
            raise CfError(ErrorCode.NOK, "no command given")
        if node.func is None:
            self.output(sess, "Not fully matched!\n")
            raise CfError(ErrorCode.NOK, "Not fully matched!")
        return node.func(self, sess, argv[matched:])

    def help(self, argv: Sequence[str] = (), sess: Any = None) -> None:
        """Show the sub-commands of the command named by ``argv``."""
        node = self.root
        self.output(sess, "command: ")
        for word in argv:
            child = node.children.get(word)
            if child is None:
                break
            self.output(sess, f"{word} ")
            node = child
        self.output(sess, "\nhelp: \n")
        for child in node.children.values():
            desc = child.desc if child.desc is not None else NO_DESC
            self.output(sess, f"    {child.name:<10}{desc}\n")


def _split(s: str) -> Iterator[str]:
    pos = 0
    length = len(s)
    while True:
        while pos < length and s[pos] in _SPACES:
            pos += 1
        if pos >= length:
            return
        if s[pos] == '"':
            start = pos + 1
            end = s.find('"', start)
            if end < 0:
                yield s[start:]
                return
            yield s[start:end]
            pos = end + 1
        else:
            start = pos
            while pos < length and s[pos] not in _SPACES:
                pos += 1
            yield s[start:pos]
            pos += 1


def parse_args(s: str) -> list[str]:
    """Split a command line into words; double quotes group spaces."""
    return list(_split(s))