"""Built-in commands and error reporting."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from .command_table import Command
from .tokens import TokenType

_PREFIX = "minishell: "


def report_error(
    command: Optional[str],
    message: str,
    status: int = 1,
    stream: Optional[TextIO] = None,
) -> int:
    """Write ``minishell: [command: ]message`` to stream and return status."""
    stream = sys.stderr if stream is None else stream
    text = _PREFIX
    if command is not None:
        text += f"{command}: "
    stream.write(f"{text}{message}\n")
    return status


def _open_output(command: Command) -> Optional[TextIO]:
    """Open every output redirection in order; return the last one opened.

    Returns None when there is no output redirection. Raises OSError when a
    file cannot be opened; any file already opened is closed first.
    """
    handle: Optional[TextIO] = None
    for redirection in command.outfiles:
        if redirection.type is TokenType.REDIR_OUT:
            mode = "w"
        elif redirection.type is TokenType.REDIR_APPEND:
            mode = "a"
        else:
            continue
        if handle is not None:
            handle.close()
            handle = None
        handle = open(redirection.name, mode, encoding="utf-8")
    return handle


def echo(
    command: Command,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Print the arguments separated by spaces; leading ``-n`` drops the newline."""
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    words = command.args[1:]
    newline = True
    while words and words[0] == "-n":
        newline = False
        words = words[1:]
    try:
        handle = _open_output(command)
    except OSError as exc:
        return report_error(None, exc.strerror or str(exc), 1, stderr)
    target = stdout if handle is None else handle
    try:
        target.write(" ".join(words))
        if newline:
            target.write("\n")
    finally:
        if handle is not None:
            handle.close()
    return 0


def pwd(stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Print the current working directory."""
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    try:
        cwd = os.getcwd()
    except OSError as exc:
        report_error("pwd", exc.strerror or str(exc), exc.errno or 1, stderr)
        return 1
    stdout.write(f"{cwd}\n")
    return 0