"""Cursor-based reader over a single command line."""

from __future__ import annotations

from strarg.chars import (
    ESCAPE,
    is_allowed_in_unquoted_string,
    is_allowed_in_unquoted_string_relaxed,
    is_quoted_string_start,
    is_whitespace,
)
from strarg.errors import CommandSyntaxError


class StringReader:
    """Read tokens from an immutable input string, advancing a cursor.

    The cursor only moves forward during reads. A read that fails leaves the
    cursor where the failure was detected; callers that want to retry must
    restore it themselves.
    """

    def __init__(self, string: str, cursor: int = 0) -> None:
        self._string = string
        self._cursor = cursor

    @property
    def string(self) -> str:
        return self._string

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, value: int) -> None:
        self._cursor = value

    @property
    def total_length(self) -> int:
        return len(self._string)

    @property
    def remaining_length(self) -> int:
        return len(self._string) - self._cursor

    @property
    def remaining(self) -> str:
        """Text from the cursor to the end of input."""
        return self._string[self._cursor :]

    def get_read(self) -> str:
        """Text consumed so far."""
        return self._string[: self._cursor]

    def __repr__(self) -> str:
        return f"StringReader({self._string!r}, cursor={self._cursor})"

    # ------------------------------------------------------------------
    # Character access
    # ------------------------------------------------------------------

    def can_read(self, length: int = 1) -> bool:
        return self._cursor + length <= len(self._string)

    def peek(self, offset: int = 0) -> str:
        idx = self._cursor + offset
        if idx < len(self._string):
            return self._string[idx]
        return ""

    def read(self) -> str:
        ch = self._string[self._cursor]
        self._cursor += 1
        return ch

    def skip(self) -> None:
        self._cursor += 1

    def skip_whitespace(self) -> None:
        while self.can_read() and is_whitespace(self.peek()):
            self.skip()

    def _error(self, message: str) -> CommandSyntaxError:
        return CommandSyntaxError(message, self._cursor, self._string)

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def read_unquoted_string(self) -> str:
        """Read the longest run of strict unquoted characters (may be empty)."""
        start = self._cursor
        while self.can_read() and is_allowed_in_unquoted_string(self.peek()):
            self.skip()
        return self._string[start : self._cursor]

    def read_unquoted_string_relaxed(self) -> str:
        """Read the longest run of relaxed unquoted characters (may be empty)."""
        start = self._cursor
        while self.can_read() and is_allowed_in_unquoted_string_relaxed(self.peek()):
            self.skip()
        return self._string[start : self._cursor]

    def read_quoted_string(self) -> str:
        """Read a quoted string starting at the cursor, resolving escapes."""
        if not self.can_read():
            return ""
        quote = self.peek()
        if not is_quoted_string_start(quote):
            raise self._error("Expected quote to start a string")
        self.skip()
        return self.read_string_until(quote)

    def read_string_until(self, terminator: str) -> str:
        """Read up to an unescaped terminator, consuming it.

        Only the escape character and the terminator itself may follow an
        escape character.
        """
        chars: list[str] = []
        escaped = False
        while self.can_read():
            ch = self.read()
            if escaped:
                if ch == terminator or ch == ESCAPE:
                    chars.append(ch)
                    escaped = False
                else:
                    self._cursor -= 1
                    raise self._error(f"Invalid escape sequence '{ch}' in quoted string")
            elif ch == ESCAPE:
                escaped = True
            elif ch == terminator:
                return "".join(chars)
            else:
                chars.append(ch)

        raise self._error("Unclosed quoted string")

    def read_string(self) -> str:
        """Read a quoted string if one starts at the cursor, else a strict word."""
        if not self.can_read():
            return ""
        ch = self.peek()
        if is_quoted_string_start(ch):
            self.skip()
            return self.read_string_until(ch)
        return self.read_unquoted_string()
