"""Test the cursor reader: character access, unquoted and quoted reads."""

from __future__ import annotations

import pytest

from strarg.errors import CommandSyntaxError
from strarg.reader import StringReader

from conftest import assert_cursor, assert_syntax_error


class TestCursor:
    def test_initial_state(self) -> None:
        reader = StringReader("abc")
        assert reader.cursor == 0
        assert reader.total_length == 3
        assert reader.remaining == "abc"
        assert reader.remaining_length == 3
        assert reader.get_read() == ""

    def test_set_cursor(self) -> None:
        reader = StringReader("hello world")
        reader.cursor = 6
        assert reader.remaining == "world"
        assert reader.get_read() == "hello "

    def test_start_cursor(self) -> None:
        reader = StringReader("  abc", 2)
        assert reader.peek() == "a"

    def test_can_read(self) -> None:
        reader = StringReader("ab")
        assert reader.can_read()
        assert reader.can_read(2)
        assert not reader.can_read(3)
        reader.cursor = 2
        assert not reader.can_read()

    def test_peek_and_read(self) -> None:
        reader = StringReader("ab")
        assert reader.peek() == "a"
        assert reader.peek(1) == "b"
        assert reader.peek(2) == ""
        assert reader.read() == "a"
        assert_cursor(reader, 1)

    def test_skip_whitespace(self) -> None:
        reader = StringReader(" \t x")
        reader.skip_whitespace()
        assert_cursor(reader, 3)


class TestUnquoted:
    def test_strict_stops_at_space(self) -> None:
        reader = StringReader("foo bar")
        assert reader.read_unquoted_string() == "foo"
        assert reader.peek() == " "

    def test_strict_stops_at_disallowed(self) -> None:
        reader = StringReader("abc!def")
        assert reader.read_unquoted_string() == "abc"
        assert_cursor(reader, 3)

    def test_strict_empty(self) -> None:
        reader = StringReader("!abc")
        assert reader.read_unquoted_string() == ""
        assert_cursor(reader, 0)

    def test_strict_at_end(self) -> None:
        reader = StringReader("")
        assert reader.read_unquoted_string() == ""

    def test_relaxed_accepts_symbols(self) -> None:
        reader = StringReader("wörd! next")
        assert reader.read_unquoted_string_relaxed() == "wörd!"
        assert_cursor(reader, 5)

    def test_relaxed_stops_at_quote(self) -> None:
        reader = StringReader('ab"cd')
        assert reader.read_unquoted_string_relaxed() == "ab"
        assert_cursor(reader, 2)


class TestQuoted:
    def test_double_quoted(self) -> None:
        reader = StringReader('"hello world" rest')
        assert reader.read_quoted_string() == "hello world"
        assert reader.remaining == " rest"

    def test_single_quoted(self) -> None:
        reader = StringReader("'it is'")
        assert reader.read_quoted_string() == "it is"
        assert_cursor(reader, 7)

    def test_escapes(self) -> None:
        reader = StringReader(r'"a\\b\"c"')
        assert reader.read_quoted_string() == 'a\\b"c'

    def test_other_quote_needs_no_escape(self) -> None:
        reader = StringReader("\"it's\"")
        assert reader.read_quoted_string() == "it's"

    def test_escaped_single_quote_in_single_quotes(self) -> None:
        reader = StringReader(r"'it\'s'")
        assert reader.read_quoted_string() == "it's"

    def test_empty_quoted(self) -> None:
        reader = StringReader('""')
        assert reader.read_quoted_string() == ""
        assert_cursor(reader, 2)

    def test_empty_input(self) -> None:
        assert StringReader("").read_quoted_string() == ""

    def test_missing_open_quote(self) -> None:
        with pytest.raises(CommandSyntaxError) as exc_info:
            StringReader("abc").read_quoted_string()
        assert_syntax_error(exc_info.value, 0, "expected quote")

    def test_unclosed(self) -> None:
        reader = StringReader('"abc')
        with pytest.raises(CommandSyntaxError) as exc_info:
            reader.read_quoted_string()
        assert_syntax_error(exc_info.value, 4, "unclosed")
        assert_cursor(reader, 4)

    def test_unclosed_after_escape(self) -> None:
        with pytest.raises(CommandSyntaxError, match="Unclosed"):
            StringReader('"abc\\').read_quoted_string()

    def test_invalid_escape(self) -> None:
        reader = StringReader(r'"ab\nc"')
        with pytest.raises(CommandSyntaxError) as exc_info:
            reader.read_quoted_string()
        # Cursor points at the character after the backslash
        assert_syntax_error(exc_info.value, 4, "invalid escape sequence 'n'")
        assert_cursor(reader, 4)


class TestReadString:
    def test_quoted(self) -> None:
        assert StringReader('"a b"').read_string() == "a b"

    def test_unquoted_falls_back_to_strict(self) -> None:
        reader = StringReader("abc!def")
        assert reader.read_string() == "abc"
        assert_cursor(reader, 3)

    def test_empty(self) -> None:
        assert StringReader("").read_string() == ""
