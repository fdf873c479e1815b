"""String argument types: word, relaxed word, quotable phrase, greedy phrase."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from strarg.chars import DOUBLE_QUOTE, ESCAPE, is_allowed_in_unquoted_string_relaxed

if TYPE_CHECKING:
    from strarg.context import CommandContext
    from strarg.reader import StringReader


class StringType(Enum):
    """Parsing policy, with its usage label and help-text examples."""

    SINGLE_WORD = ("word()", ("word", "words_with_underscores"))
    QUOTABLE_PHRASE = ("string()", ('"quoted phrase"', "word", "wörd!", '""'))
    GREEDY_PHRASE = ("greedy_string()", ("word", "words with spaces", '"and symbols"'))
    SINGLE_WORD_RELAXED = ("relaxed_word()", ("word", "wörd!"))

    def __init__(self, label: str, examples: tuple[str, ...]) -> None:
        self.label = label
        self.examples = examples


@dataclass(frozen=True, slots=True)
class StringArgumentType:
    """An argument type producing ``str`` values under one StringType policy."""

    type: StringType

    def parse(self, reader: StringReader) -> str:
        """Consume this argument from *reader* and return its text.

        Raises CommandSyntaxError from the reader unchanged; the cursor is not
        restored on failure.
        """
        if self.type is StringType.SINGLE_WORD:
            return reader.read_unquoted_string()
        if self.type is StringType.QUOTABLE_PHRASE:
            return reader.read_string()
        if self.type is StringType.GREEDY_PHRASE:
            text = reader.remaining
            reader.cursor = reader.total_length
            return text
        return reader.read_unquoted_string_relaxed()

    def describe(self) -> str:
        return self.type.label

    def examples(self) -> tuple[str, ...]:
        return self.type.examples

    def __str__(self) -> str:
        return self.type.label


def word() -> StringArgumentType:
    """A single strict unquoted word."""
    return StringArgumentType(StringType.SINGLE_WORD)


def relaxed_word() -> StringArgumentType:
    """A single word allowing any non-whitespace, non-quote character."""
    return StringArgumentType(StringType.SINGLE_WORD_RELAXED)


def string() -> StringArgumentType:
    """A quoted phrase, or a single strict word when unquoted."""
    return StringArgumentType(StringType.QUOTABLE_PHRASE)


def greedy_string() -> StringArgumentType:
    """The rest of the input, verbatim. Must be the last argument."""
    return StringArgumentType(StringType.GREEDY_PHRASE)


def get_string(context: CommandContext, name: str) -> str:
    """Return the string argument *name* parsed into *context*."""
    return context.get_argument(name, str)


def escape_if_required(text: str) -> str:
    """Return *text* unchanged if it is a valid relaxed word, else quote it.

    The quoted form escapes backslashes and double quotes, so reading it back
    as a quoted phrase yields *text* exactly.
    """
    for ch in text:
        if not is_allowed_in_unquoted_string_relaxed(ch):
            return quote(text)
    return text


def quote(text: str) -> str:
    """Wrap *text* in double quotes, escaping backslashes and double quotes."""
    parts = [DOUBLE_QUOTE]
    for ch in text:
        if ch == ESCAPE or ch == DOUBLE_QUOTE:
            parts.append(ESCAPE)
        parts.append(ch)
    parts.append(DOUBLE_QUOTE)
    return "".join(parts)
