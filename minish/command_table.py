"""Grouping tokens into commands with their arguments and redirections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .tokens import Token, TokenType, skip_word

_INPUT_TYPES = (TokenType.REDIR_IN, TokenType.HEREDOC)
_OUTPUT_TYPES = (TokenType.REDIR_OUT, TokenType.REDIR_APPEND)


@dataclass
class Redirection:
    """A redirection operator and the name that follows it."""

    type: TokenType
    name: str


@dataclass
class Command:
    """One simple command of a pipeline."""

    args: list[str] = field(default_factory=list)
    infiles: list[Redirection] = field(default_factory=list)
    outfiles: list[Redirection] = field(default_factory=list)


def _redirection(tokens: Sequence[Token], index: int) -> Redirection:
    if index + 1 >= len(tokens):
        raise ValueError(f"missing target after {tokens[index].value!r}")
    return Redirection(tokens[index].type, tokens[index + 1].value)


def _argument(tokens: Sequence[Token], index: int) -> str:
    token = tokens[index]
    if token.type is TokenType.WORD:
        return token.value
    parts = []
    while index < len(tokens) and tokens[index].type is TokenType.WORD_ADJ:
        parts.append(tokens[index].value)
        index += 1
    return "".join(parts)


def _fill_command(tokens: Sequence[Token], index: int) -> tuple[Command, int]:
    command = Command()
    while index < len(tokens) and tokens[index].type is not TokenType.PIPE:
        kind = tokens[index].type
        if kind in _INPUT_TYPES:
            command.infiles.append(_redirection(tokens, index))
        elif kind in _OUTPUT_TYPES:
            command.outfiles.append(_redirection(tokens, index))
        elif kind.is_word:
            command.args.append(_argument(tokens, index))
        if kind is TokenType.WORD:
            index += 1
        else:
            index = skip_word(tokens, index, True)
    return command, index


def build_commands(tokens: Sequence[Token]) -> list[Command]:
    """Split tokens at pipes into commands.

    Adjacent word tokens are joined into one argument. Raises ValueError when
    a redirection has nothing after it.
    """
    commands: list[Command] = []
    index = 0
    while True:
        command, index = _fill_command(tokens, index)
        commands.append(command)
        if index >= len(tokens):
            return commands
        index += 1