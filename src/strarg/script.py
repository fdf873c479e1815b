"""Command scripts: one command per line, with blank and comment lines skipped."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from strarg.command import ArgumentSpec, parse_arguments, split_line
from strarg.context import CommandContext
from strarg.errors import CommandSyntaxError
from strarg.reader import StringReader

DEFAULT_COMMENT = "#"


@dataclass(frozen=True, slots=True)
class ScriptIssue:
    """A syntax error on one script line (1-based)."""

    line: int
    error: CommandSyntaxError

    def format(self, filename: str = "<input>") -> str:
        """Render the error with a file:line:column locator and a gutter."""
        source_line, caret = self.error.snippet()
        number = str(self.line)
        pad = " " * len(number)
        return (
            f"error: {self.error.message}\n"
            f"{pad}--> {filename}:{self.line}:{self.error.column}\n"
            f"{number} | {source_line}\n"
            f"{pad} | {caret}"
        )


def iter_commands(source: str, comment: str = DEFAULT_COMMENT) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every command line in *source*."""
    for number, line in enumerate(source.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        if comment and stripped.startswith(comment):
            continue
        yield number, line


def parse_command(line: str, specs: Sequence[ArgumentSpec]) -> CommandContext:
    """Parse one script line against *specs*, skipping its indentation.

    Cursor positions in the result and in errors stay relative to *line*.
    """
    indent = len(line) - len(line.lstrip())
    return parse_arguments(line, specs, StringReader(line, indent))


def check_script(
    source: str,
    specs: Sequence[ArgumentSpec] | None = None,
    comment: str = DEFAULT_COMMENT,
) -> list[ScriptIssue]:
    """Parse every command in *source* and collect the failures.

    With *specs*, each line is parsed against that layout; otherwise it is
    split into quotable phrases.
    """
    issues: list[ScriptIssue] = []
    for number, line in iter_commands(source, comment):
        try:
            if specs:
                parse_command(line, specs)
            else:
                split_line(line)
        except CommandSyntaxError as exc:
            issues.append(ScriptIssue(number, exc))
    return issues
