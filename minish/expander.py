"""Environment parsing and ``$NAME`` expansion of word tokens."""

from __future__ import annotations

import string
from dataclasses import replace
from typing import Iterable, Mapping, Optional, Sequence

from .tokens import QuoteType, Token

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def parse_environment(envp: Iterable[str]) -> dict[str, str]:
    """Build a name-to-value mapping from ``NAME=value`` strings.

    The first ``=`` after the first character separates name from value;
    entries without one are ignored. A later entry for a name wins.
    """
    env: dict[str, str] = {}
    for entry in envp:
        split = entry.find("=", 1)
        if split == -1:
            continue
        env[entry[:split]] = entry[split + 1 :]
    return env


def valid_name_length(text: str) -> int:
    """Return how many leading characters of text may form a variable name."""
    count = 0
    for ch in text:
        if ch not in _NAME_CHARS:
            break
        count += 1
    return count


def _key_matches(name: str, key: str) -> bool:
    if not key.startswith(name):
        return False
    return len(key) == len(name) or key[len(name)] not in _NAME_CHARS


def _lookup(text: str, env: Mapping[str, str]) -> Optional[str]:
    name = text[: valid_name_length(text)]
    for key, value in reversed(list(env.items())):
        if _key_matches(name, key):
            return value
    return None


def _expand_rest(text: str, env: Mapping[str, str]) -> str:
    """Expand the text that follows a first ``$``.

    Only the values of the variables are kept. Expansion stops at the first
    unknown name once something has been expanded; leading unknown names are
    passed over.
    """
    expanded: Optional[str] = None
    pos = 0
    while True:
        value = _lookup(text[pos:], env)
        following = text.find("$", pos + 1)
        if value is not None:
            expanded = (expanded or "") + value
            if following == -1:
                return expanded
        else:
            if following == -1:
                return expanded or ""
            if expanded is not None:
                return expanded
        pos = following + 1


def expand_word(value: str, env: Mapping[str, str]) -> str:
    """Replace everything from the first ``$`` of value with its expansion."""
    dollar = value.find("$")
    if dollar == -1:
        return value
    return value[:dollar] + _expand_rest(value[dollar + 1 :], env)


def expand_tokens(tokens: Sequence[Token], env: Mapping[str, str]) -> list[Token]:
    """Return the tokens with variables expanded, except in single quotes."""
    return [
        token
        if token.quotes is QuoteType.SINGLE
        else replace(token, value=expand_word(token.value, env))
        for token in tokens
    ]