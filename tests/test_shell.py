import io
import os

import pytest

from minish.shell import (
    COMMAND_NOT_FOUND,
    UNCLOSED_QUOTES,
    Shell,
    ShellSyntaxError,
    check_input,
)
from minish.tokens import TokenType


def make_shell(environ=None):
    out, err = io.StringIO(), io.StringIO()
    return Shell(environ or {}, out, err), out, err


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_check_input_blank(line):
    assert check_input(line) is False


def test_check_input_accepts_command():
    assert check_input("echo 'a' \"b\"") is True


def test_check_input_leading_pipe():
    with pytest.raises(ShellSyntaxError) as info:
        check_input("  | ls")
    assert str(info.value) == COMMAND_NOT_FOUND + "parse error near `|'"


@pytest.mark.parametrize("line", ["ls |", "cat <", "echo >"])
def test_check_input_trailing_operator(line):
    with pytest.raises(ShellSyntaxError) as info:
        check_input(line)
    assert str(info.value) == COMMAND_NOT_FOUND + "parse error near `\\n'"


@pytest.mark.parametrize("line", ["echo 'a", 'echo "a'])
def test_check_input_unclosed_quotes(line):
    with pytest.raises(ShellSyntaxError) as info:
        check_input(line)
    assert str(info.value) == UNCLOSED_QUOTES


def test_parse_expands_and_redirects():
    shell, _, _ = make_shell({"USER": "alice"})
    commands = shell.parse('echo "$USER" > out')
    assert commands[0].args == ["echo", "alice"]
    assert [(r.type, r.name) for r in commands[0].outfiles] == [
        (TokenType.REDIR_OUT, "out")
    ]


def test_parse_keeps_single_quoted_dollar():
    shell, _, _ = make_shell({"USER": "alice"})
    assert shell.parse("echo '$USER'")[0].args == ["echo", "$USER"]


def test_environ_from_strings():
    shell = Shell(["HOME=/home/alice"], io.StringIO(), io.StringIO())
    assert shell.env["HOME"] == "/home/alice"


def test_run_line_echo():
    shell, out, _ = make_shell()
    assert shell.run_line("echo hello world") == 0
    assert out.getvalue() == "hello world\n"
    assert shell.history == ["echo hello world"]


def test_run_line_pwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shell, out, _ = make_shell()
    assert shell.run_line("pwd") == 0
    assert out.getvalue() == os.getcwd() + "\n"


def test_run_line_echo_redirect(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shell, out, _ = make_shell()
    shell.run_line("echo hi > o.txt")
    assert (tmp_path / "o.txt").read_text() == "hi\n"
    assert out.getvalue() == ""


def test_run_line_malformed_reports_error():
    shell, out, err = make_shell()
    assert shell.run_line("'a\"b' \"c") == 1
    assert out.getvalue() == ""
    assert err.getvalue().startswith("minishell: ")


def test_execute_unknown_command_is_silent():
    shell, out, _ = make_shell()
    assert shell.execute(shell.parse("ls -l")) == 0
    assert out.getvalue() == ""


def test_execute_empty():
    shell, out, _ = make_shell()
    assert shell.execute([]) == 0
    assert out.getvalue() == ""


def test_run_until_end_of_input():
    shell, out, _ = make_shell()
    assert shell.run(["echo a", "echo b"]) == 1
    assert out.getvalue() == "a\nb\nexit\n"


def test_run_stops_at_blank_line():
    shell, out, _ = make_shell()
    assert shell.run(["echo a", "", "echo b"]) == 0
    assert out.getvalue() == "a\n"


def test_run_stops_at_syntax_error():
    shell, out, _ = make_shell()
    assert shell.run(["ls |", "echo b"]) == 0
    assert out.getvalue() == COMMAND_NOT_FOUND + "parse error near `\\n'\n"
    assert shell.history == []