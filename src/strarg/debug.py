"""--debug parsed-argument dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from strarg.command import ArgumentSpec
from strarg.context import CommandContext


def dump_context(
    context: CommandContext,
    specs: Sequence[ArgumentSpec] = (),
    *,
    file: TextIO = sys.stderr,
) -> None:
    """Print a human-readable view of *context* to *file*."""
    kinds = {spec.name: spec.type.describe() for spec in specs}
    file.write(f"Command {context.input!r}\n")
    for name, argument in context.arguments.items():
        kind = kinds.get(name, "?")
        r = argument.range
        file.write(f"  Arg {name} {kind} [{r.start}:{r.end}] = {argument.result!r}\n")


def dump_parts(source: str, parts: Sequence[str], *, file: TextIO = sys.stderr) -> None:
    """Print the phrases a line was split into."""
    file.write(f"Line {source!r}\n")
    for index, part in enumerate(parts):
        file.write(f"  Phrase {index} = {part!r}\n")
