"""The interactive shell: input checks, parsing and built-in dispatch."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional, Sequence, TextIO, Union

from .builtins import echo, pwd, report_error
from .command_table import Command, build_commands
from .expander import expand_tokens, parse_environment
from .tokens import strip_quotes, tokenize

PROMPT = "minishell > "
COMMAND_NOT_FOUND = "command not found : "
UNCLOSED_QUOTES = "Syntax error : please close your quotes."

_SPACES = "\t\n\v\f\r "


class ShellSyntaxError(Exception):
    """An input line rejected before parsing."""


def check_input(line: str) -> bool:
    """Decide whether a line should be parsed.

    Returns False for an empty or blank line and raises ShellSyntaxError for a
    leading pipe, a trailing operator or an odd number of quotes.
    """
    if line == "":
        return False
    if line.lstrip(_SPACES).startswith("|"):
        raise ShellSyntaxError(COMMAND_NOT_FOUND + "parse error near `|'")
    if line[-1] in "|<>":
        raise ShellSyntaxError(COMMAND_NOT_FOUND + "parse error near `\\n'")
    if line.strip(_SPACES) == "":
        return False
    if line.count("'") % 2 or line.count('"') % 2:
        raise ShellSyntaxError(UNCLOSED_QUOTES)
    return True


EnvironSource = Union[Mapping[str, str], Iterable[str]]


class Shell:
    """A shell session with its environment and output streams."""

    def __init__(
        self,
        environ: Optional[EnvironSource] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        if environ is None:
            environ = os.environ
        if isinstance(environ, Mapping):
            self.env = parse_environment(f"{k}={v}" for k, v in environ.items())
        else:
            self.env = parse_environment(environ)
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr
        self.history: list[str] = []

    def parse(self, line: str) -> list[Command]:
        """Turn a line into commands; raises ValueError on malformed input."""
        tokens = strip_quotes(tokenize(line))
        tokens = expand_tokens(tokens, self.env)
        return build_commands(tokens)

    def execute(self, commands: Sequence[Command]) -> int:
        """Run the built-in named by the first command, if any."""
        if not commands or not commands[0].args:
            return 0
        first = commands[0]
        name = first.args[0]
        status = 0
        if name.startswith("echo"):
            status = echo(first, self.stdout, self.stderr)
        if name.startswith("pwd"):
            status = pwd(self.stdout, self.stderr)
        return status

    def run_line(self, line: str) -> int:
        """Parse and execute one accepted line, recording it in the history."""
        try:
            commands = self.parse(line)
        except ValueError as exc:
            status = report_error(None, str(exc), 1, self.stderr)
        else:
            status = self.execute(commands)
        self.history.append(line)
        return status

    def run(self, lines: Iterable[str]) -> int:
        """Process lines until one is rejected or the input ends.

        A rejected line ends the session with status 0; end of input prints
        ``exit`` and gives status 1.
        """
        for line in lines:
            try:
                accepted = check_input(line)
            except ShellSyntaxError as exc:
                self.stdout.write(f"{exc}\n")
                self.stdout.flush()
                return 0
            if not accepted:
                return 0
            self.run_line(line)
            self.stdout.flush()
        self.stdout.write("exit\n")
        self.stdout.flush()
        return 1


def _prompt_lines() -> Iterator[str]:
    while True:
        try:
            yield input(PROMPT)
        except KeyboardInterrupt:
            sys.stdout.write("\n")
            sys.stdout.flush()
        except EOFError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run an interactive session on the terminal."""
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)
    return Shell().run(_prompt_lines())


if __name__ == "__main__":
    sys.exit(main())