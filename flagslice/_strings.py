"""Utilities for splitting raw flag arguments into tokens and joining them back.

The wire format is a comma-delimited list. A double quote opens a span in which
commas are literal, and the next double quote closes it. There is no escaping;
tokens containing a double quote can't be round-tripped."""

from __future__ import annotations

from typing import Iterable

from ._errors import UnbalancedQuoteError

DELIMITER = ","
QUOTE = '"'


def _split_outside_quotes(raw: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in raw:
        if char == QUOTE:
            in_quotes = not in_quotes
            current.append(char)
        elif char == DELIMITER and not in_quotes:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    if in_quotes:
        raise UnbalancedQuoteError(raw)
    parts.append("".join(current))
    return parts


def is_wrapped_in_quotes(token: str) -> bool:
    """True if the first and last characters of `token` are a matching pair of
    quotes. `"a"b"c"` is not wrapped: its first quote closes at the second."""
    return (
        len(token) >= 2
        and token[0] == QUOTE
        and token[-1] == QUOTE
        and QUOTE not in token[1:-1]
    )


def split_tokens(raw: str, unwrap_quoted: bool = False) -> list[str]:
    """Split a raw argument into trimmed tokens.

    '1, 0,T'               => ['1', '0', 'T']
    '"a,b", c'             => ['a,b', 'c']
    '"a,b", c' (unwrapped) => ['a', 'b', 'c']
    ''                     => []

    Args:
        raw: A single command-line argument.
        unwrap_quoted: If True, the contents of a quoted token are split once
            more. Used for element types whose spellings never contain the
            delimiter, where quotes only protect the list from the shell.

    Returns:
        Tokens in left-to-right order.
    """
    if raw.strip() == "":
        return []

    out: list[str] = []
    for token in _split_outside_quotes(raw):
        token = token.strip()
        if is_wrapped_in_quotes(token):
            if unwrap_quoted:
                out.extend(split_tokens(token[1:-1]))
                continue
            token = token[1:-1]
        out.append(token)
    return out


def quote_token(token: str) -> str:
    """Wrap a token in quotes if splitting would otherwise alter it."""
    if token == "" or DELIMITER in token or token != token.strip():
        return QUOTE + token + QUOTE
    return token


def join_tokens(tokens: Iterable[str]) -> str:
    """Inverse of `split_tokens()` for tokens that contain no quote characters."""
    return DELIMITER.join(quote_token(token) for token in tokens)
