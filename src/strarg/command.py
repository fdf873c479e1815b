"""Apply string argument types in sequence to a command line."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from strarg.arguments import (
    StringArgumentType,
    StringType,
    greedy_string,
    quote,
    relaxed_word,
    string,
    word,
)
from strarg.chars import ARGUMENT_SEPARATOR, is_allowed_in_unquoted_string, is_whitespace
from strarg.context import CommandContext, ParsedArgument, StringRange
from strarg.errors import CommandSyntaxError
from strarg.reader import StringReader

# Kind names accepted in NAME:KIND layout entries
KINDS: dict[str, Callable[[], StringArgumentType]] = {
    "word": word,
    "relaxed": relaxed_word,
    "string": string,
    "greedy": greedy_string,
}


@dataclass(frozen=True, slots=True)
class ArgumentSpec:
    """A named argument slot in a command layout."""

    name: str
    type: StringArgumentType

    def __str__(self) -> str:
        return f"<{self.name}>"


def parse_argument_spec(s: str) -> ArgumentSpec:
    """Parse a NAME:KIND string into an ArgumentSpec."""
    name, sep, kind = s.partition(":")
    if not sep or not name:
        raise ValueError(f"invalid argument format (expected NAME:KIND): {s}")
    factory = KINDS.get(kind)
    if factory is None:
        known = ", ".join(KINDS)
        raise ValueError(f"unknown argument kind {kind!r} (expected one of: {known})")
    return ArgumentSpec(name, factory())


def check_layout(specs: Sequence[ArgumentSpec]) -> None:
    """Reject layouts with duplicate names or a greedy argument before the end."""
    seen: set[str] = set()
    for index, spec in enumerate(specs):
        if spec.name in seen:
            raise ValueError(f"duplicate argument name: {spec.name}")
        seen.add(spec.name)
        if spec.type.type is StringType.GREEDY_PHRASE and index != len(specs) - 1:
            raise ValueError(f"greedy argument '{spec.name}' must be the last argument")


def parse_arguments(
    source: str,
    specs: Sequence[ArgumentSpec],
    reader: StringReader | None = None,
) -> CommandContext:
    """Parse *source* against *specs*, one argument per separator-delimited slot.

    Raises CommandSyntaxError on the first failing argument.
    """
    check_layout(specs)
    if reader is None:
        reader = StringReader(source)
    context = CommandContext(reader.string)

    for index, spec in enumerate(specs):
        # Each argument needs at least one character, after the separator if not first
        needed = 2 if index else 1
        if not reader.can_read(needed):
            raise CommandSyntaxError(
                f"Expected argument '{spec.name}'", reader.total_length, reader.string
            )
        if index:
            reader.skip()

        start = reader.cursor
        result = spec.type.parse(reader)
        if reader.can_read() and reader.peek() != ARGUMENT_SEPARATOR:
            raise CommandSyntaxError(
                "Expected whitespace to end one argument, but found trailing data",
                reader.cursor,
                reader.string,
            )
        context.with_argument(spec.name, ParsedArgument(StringRange(start, reader.cursor), result))

    if reader.can_read():
        raise CommandSyntaxError("Incorrect argument for command", reader.cursor, reader.string)
    return context


def split_line(source: str) -> list[str]:
    """Split a line into quotable phrases separated by whitespace."""
    reader = StringReader(source)
    phrase = string()
    parts: list[str] = []

    reader.skip_whitespace()
    while reader.can_read():
        parts.append(phrase.parse(reader))
        if reader.can_read() and not is_whitespace(reader.peek()):
            raise CommandSyntaxError(
                "Expected whitespace to end one argument, but found trailing data",
                reader.cursor,
                reader.string,
            )
        reader.skip_whitespace()
    return parts


def _render_phrase(text: str) -> str:
    # Unquoted phrases are read back with the strict word grammar
    if text and all(is_allowed_in_unquoted_string(ch) for ch in text):
        return text
    return quote(text)


def join_line(parts: Sequence[str]) -> str:
    """Render phrases back into a line that split_line reads as *parts*."""
    return ARGUMENT_SEPARATOR.join(_render_phrase(p) for p in parts)


def render_arguments(context: CommandContext, specs: Sequence[ArgumentSpec]) -> str:
    """Render the values stored in *context* back into command syntax."""
    rendered: list[str] = []
    for spec in specs:
        value = context.get_argument(spec.name, str)
        if spec.type.type is StringType.QUOTABLE_PHRASE:
            rendered.append(_render_phrase(value))
        else:
            rendered.append(value)
    return ARGUMENT_SEPARATOR.join(rendered)


def format_usage(specs: Sequence[ArgumentSpec]) -> str:
    return ARGUMENT_SEPARATOR.join(str(s) for s in specs)


def format_examples(arg_type: StringArgumentType) -> str:
    """One-line help entry: label followed by its examples."""
    return f"{arg_type.describe()}: {', '.join(arg_type.examples())}"
