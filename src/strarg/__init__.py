"""String argument types for command-line and command-tree parsers."""

from __future__ import annotations

from strarg.arguments import (
    StringArgumentType,
    StringType,
    escape_if_required,
    get_string,
    greedy_string,
    relaxed_word,
    string,
    word,
)
from strarg.errors import ArgumentError, CommandSyntaxError
from strarg.reader import StringReader

__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "CommandSyntaxError",
    "StringArgumentType",
    "StringReader",
    "StringType",
    "escape_if_required",
    "get_string",
    "greedy_string",
    "parse",
    "relaxed_word",
    "string",
    "word",
]


def parse(source: str, arg_type: StringArgumentType) -> str:
    """Parse a single argument of *arg_type* from the start of *source*."""
    return arg_type.parse(StringReader(source))
