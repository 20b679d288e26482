"""Splitting an input line into shell tokens."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence

_SPACES = frozenset("\t\n\v\f\r ")
_QUOTES = {"'": None, '"': None}


class QuoteType(Enum):
    """How a word token was quoted in the input."""

    NONE = 0
    SINGLE = 1
    DOUBLE = 2


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    WORD = 0
    WORD_ADJ = 1
    PIPE = 2
    REDIR_IN = 3
    REDIR_OUT = 4
    REDIR_APPEND = 5
    HEREDOC = 6

    @property
    def is_word(self) -> bool:
        return self in (TokenType.WORD, TokenType.WORD_ADJ)

    @property
    def is_redirection(self) -> bool:
        return self in (
            TokenType.REDIR_IN,
            TokenType.REDIR_OUT,
            TokenType.REDIR_APPEND,
            TokenType.HEREDOC,
        )


@dataclass(frozen=True)
class Token:
    """One lexical unit of an input line."""

    type: TokenType
    value: str
    quotes: QuoteType = QuoteType.NONE

    @property
    def is_word(self) -> bool:
        return self.type.is_word


# Longer operators must be tried before their one-character prefixes.
_OPERATORS = (
    ("|", TokenType.PIPE),
    (">>", TokenType.REDIR_APPEND),
    ("<<", TokenType.HEREDOC),
    (">", TokenType.REDIR_OUT),
    ("<", TokenType.REDIR_IN),
)


def _is_word_char(ch: str) -> bool:
    return ord(ch) > 32 and ch not in _QUOTES


def _skip_spaces(line: str, index: int) -> int:
    while index < len(line) and line[index] in _SPACES:
        index += 1
    return index


def _read_word(line: str, start: int) -> tuple[Token, int]:
    ch = line[start]
    if ch in _QUOTES:
        close = line.find(ch, start + 1)
        if close == -1:
            raise ValueError(f"unclosed quote at position {start}")
        end = close + 1
        quotes = QuoteType.SINGLE if ch == "'" else QuoteType.DOUBLE
    else:
        end = start
        while end < len(line) and _is_word_char(line[end]):
            end += 1
        if end == start:
            raise ValueError(f"unexpected character {ch!r} at position {start}")
        quotes = QuoteType.NONE

    touches_next = end < len(line) and _is_word_char(line[end])
    touches_previous = start > 0 and ord(line[start - 1]) > 32
    kind = TokenType.WORD_ADJ if touches_next or touches_previous else TokenType.WORD
    return Token(kind, line[start:end], quotes), end


def tokenize(line: str) -> list[Token]:
    """Split a line into tokens; quoted words keep their quotes.

    Raises ValueError on an unclosed quote or an unexpected control character.
    """
    tokens: list[Token] = []
    index = 0
    while True:
        index = _skip_spaces(line, index)
        if index >= len(line):
            break
        for text, kind in _OPERATORS:
            if line.startswith(text, index):
                tokens.append(Token(kind, text))
                index += len(text)
                break
        else:
            token, index = _read_word(line, index)
            tokens.append(token)
    return tokens


def strip_quotes(tokens: Sequence[Token]) -> list[Token]:
    """Return the tokens with the enclosing quotes removed from quoted words."""
    return [
        replace(token, value=token.value[1:-1])
        if token.is_word and token.quotes is not QuoteType.NONE
        else token
        for token in tokens
    ]


def skip_word(tokens: Sequence[Token], index: int, skip_current: bool = False) -> int:
    """Return the index just past the word (or run of adjacent words) at index.

    With skip_current, the token at index (typically an operator) is passed
    over first.
    """
    if skip_current:
        index += 1
    if index >= len(tokens):
        return index
    kind = tokens[index].type
    if kind is TokenType.WORD:
        return index + 1
    if kind is TokenType.WORD_ADJ:
        while index < len(tokens) and tokens[index].type is TokenType.WORD_ADJ:
            index += 1
    return index


def count_args(tokens: Sequence[Token], index: int = 0) -> int:
    """Count the arguments of the command starting at index, up to a pipe."""
    count = 0
    while index < len(tokens) and tokens[index].type is not TokenType.PIPE:
        if tokens[index].is_word:
            count += 1
            index = skip_word(tokens, index)
        else:
            index = skip_word(tokens, index, True)
    return count


def count_redirections(tokens: Sequence[Token], index: int, *args: TokenType) -> int:
    """Count tokens of the given types from index up to the next pipe."""
    count = 0
    for offset, token in enumerate(tokens[index:]):
        if offset > 0 and token.type is TokenType.PIPE:
            break
        if token.type in args:
            count += 1
    return count