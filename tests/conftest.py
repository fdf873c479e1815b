"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from strarg.arguments import StringArgumentType
from strarg.errors import CommandSyntaxError
from strarg.reader import StringReader


@pytest.fixture
def parse_with():
    """Return a helper that parses source with an argument type.

    The helper returns (value, reader) so tests can check the cursor.
    """

    def _parse(arg_type: StringArgumentType, source: str) -> tuple[str, StringReader]:
        reader = StringReader(source)
        value = arg_type.parse(reader)
        return value, reader

    return _parse


def assert_cursor(reader: StringReader, expected: int) -> None:
    """Assert that the reader cursor sits at the expected position."""
    assert reader.cursor == expected, f"Expected cursor {expected}, got {reader.cursor}"


def assert_syntax_error(exc: CommandSyntaxError, cursor: int, fragment: str) -> None:
    """Assert the error position and that its message mentions *fragment*."""
    assert exc.cursor == cursor, f"Expected error at {cursor}, got {exc.cursor}"
    assert fragment.lower() in exc.message.lower(), (
        f"Expected {fragment!r} in message, got {exc.message!r}"
    )
