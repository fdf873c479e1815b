"""Character classification for unquoted and quoted argument text."""

from __future__ import annotations

ARGUMENT_SEPARATOR = " "
ESCAPE = "\\"
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"

# Strict unquoted: 0-9 A-Z a-z _ - . +
_UNQUOTED_SPECIAL = frozenset("_-.+")

# Never allowed in a relaxed unquoted token
_RELAXED_EXCLUDED = frozenset((DOUBLE_QUOTE, SINGLE_QUOTE, ESCAPE))


def is_allowed_in_unquoted_string(ch: str) -> bool:
    """Return True if ch may appear in a strict unquoted token."""
    return (
        "0" <= ch <= "9"
        or "A" <= ch <= "Z"
        or "a" <= ch <= "z"
        or ch in _UNQUOTED_SPECIAL
    )


def is_allowed_in_unquoted_string_relaxed(ch: str) -> bool:
    """Return True if ch may appear in a relaxed unquoted token.

    Any printable, non-whitespace character except the quote delimiters and
    the escape character.
    """
    return ch.isprintable() and not ch.isspace() and ch not in _RELAXED_EXCLUDED


def is_quoted_string_start(ch: str) -> bool:
    """Return True if ch opens a quoted string."""
    return ch == DOUBLE_QUOTE or ch == SINGLE_QUOTE


def is_whitespace(ch: str) -> bool:
    return ch.isspace()
