"""Parsed argument storage for a single command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from strarg.errors import ArgumentError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class StringRange:
    """Half-open range of cursor positions within the input."""

    start: int
    end: int

    def get(self, text: str) -> str:
        return text[self.start : self.end]

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class ParsedArgument:
    """An argument's parsed value and the input range it was read from."""

    range: StringRange
    result: Any


@dataclass(slots=True)
class CommandContext:
    """Arguments parsed from one command line, keyed by argument name."""

    input: str
    arguments: dict[str, ParsedArgument] = field(default_factory=dict)

    def with_argument(self, name: str, argument: ParsedArgument) -> CommandContext:
        self.arguments[name] = argument
        return self

    def has_argument(self, name: str) -> bool:
        return name in self.arguments

    def get_argument(self, name: str, cls: type[T]) -> T:
        """Return the value of argument *name*, checking it is a *cls*."""
        argument = self.arguments.get(name)
        if argument is None:
            raise ArgumentError(f"No such argument '{name}' exists on this command")

        result = argument.result
        if not isinstance(result, cls):
            raise ArgumentError(
                f"Argument '{name}' is defined as {type(result).__name__}, not {cls.__name__}"
            )
        return result

    @property
    def range(self) -> StringRange:
        """Range covering every parsed argument (empty at 0 if none)."""
        if not self.arguments:
            return StringRange(0, 0)
        ranges = [a.range for a in self.arguments.values()]
        return StringRange(min(r.start for r in ranges), max(r.end for r in ranges))
