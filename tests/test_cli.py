import pytest

from cfkit.cli import GROUP_DESC, Cli, Command, parse_args
from cfkit.errors import CfError, ErrorCode


@pytest.fixture
def captured():
    out = []
    cli = Cli(lambda sess, text: out.append(text))
    return cli, out


def test_register_and_dispatch_passes_remaining_args(captured):
    cli, _ = captured
    calls = []

    def handler(c, sess, args):
        calls.append((c, sess, args))
        return 7

    cli.register("show stats", "show statistics", handler)
    assert cli.input(["show", "stats", "x", "y"], "session") == 7
    assert calls == [(cli, "session", ["x", "y"])]


def test_register_creates_group_nodes(captured):
    cli, _ = captured
    cli.register("a b c", "leaf", lambda c, s, a: None)
    group = cli.root.children["a"]
    assert isinstance(group, Command)
    assert group.desc == GROUP_DESC
    assert group.func is None
    assert cli.root.children["a"].children["b"].children["c"].desc == "leaf"


def test_register_empty_command_rejected(captured):
    cli, _ = captured
    with pytest.raises(ValueError):
        cli.register("   ", "x", None)


def test_unknown_command(captured):
    cli, out = captured
    with pytest.raises(CfError) as info:
        cli.input(["nope"])
    assert info.value.errno == ErrorCode.NOK
    assert out == ["Command Not Fit!\n"]


def test_group_without_function(captured):
    cli, out = captured
    cli.register("a b", "leaf", lambda c, s, a: None)
    with pytest.raises(CfError):
        cli.input(["a"])
    assert out == ["Not fully matched!\n"]


def test_empty_input_shows_version(captured):
    cli, out = captured
    with pytest.raises(CfError):
        cli.input([])
    assert out == [cli.version_info]


def test_help_lists_children(captured):
    cli, out = captured
    cli.register("net up", "bring up", lambda c, s, a: None)
    cli.help([])
    text = "".join(out)
    assert text.startswith("command: \nhelp: \n")
    assert "    net       " + GROUP_DESC + "\n" in text


def test_question_mark_triggers_help(captured):
    cli, out = captured
    cli.register("net up", "bring up", lambda c, s, a: None)
    assert cli.input(["net", "?"]) is None
    assert "".join(out) == "command: net \nhelp: \n    up        bring up\n"


def test_help_uses_placeholder_for_missing_description(captured):
    cli, out = captured
    cli.register("x", None, lambda c, s, a: None)
    cli.help()
    assert "No informations" in "".join(out)


def test_parse_args_plain():
    assert parse_args("  cmd  a\tb ") == ["cmd", "a", "b"]


def test_parse_args_quoted():
    assert parse_args('say "hello world" now') == ["say", "hello world", "now"]


def test_parse_args_unterminated_quote():
    assert parse_args('say "hello world') == ["say", "hello world"]


def test_parse_args_empty():
    assert parse_args("   ") == []