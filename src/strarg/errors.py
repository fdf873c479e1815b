"""Error types with formatted source context."""

from __future__ import annotations


class CommandSyntaxError(Exception):
    """Raised when input cannot be parsed, with cursor and source context."""

    def __init__(self, message: str, cursor: int, source: str) -> None:
        self.message = message
        self.cursor = cursor
        self.source = source
        super().__init__(self.format())

    @property
    def column(self) -> int:
        """1-based column of the cursor."""
        return self.cursor + 1

    def snippet(self) -> tuple[str, str]:
        """Return the command line and a caret line pointing at the cursor."""
        source_line = self.source.splitlines()[0] if self.source else ""
        return source_line, " " * self.cursor + "^"

    def format(self) -> str:
        source_line, caret = self.snippet()
        return f"error: {self.message} at column {self.column}\n  {source_line}\n  {caret}"


class ArgumentError(Exception):
    """Raised when a named argument is missing from a context or has another type."""
