"""Command-line interface for strarg."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from strarg.arguments import StringArgumentType, StringType, escape_if_required
from strarg.command import (
    ArgumentSpec,
    check_layout,
    format_examples,
    format_usage,
    parse_argument_spec,
    split_line,
)
from strarg.errors import CommandSyntaxError
from strarg.script import DEFAULT_COMMENT, ScriptIssue, iter_commands, parse_command

CONFIG_NAME = "strarg.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    arguments: list[ArgumentSpec]
    comment: str
    escape: bool
    examples: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="strarg",
        description="Parse command scripts with string argument types",
    )
    p.add_argument("input", nargs="?", help="Input command script ('-' for stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-a",
        "--arg",
        action="append",
        default=[],
        metavar="NAME:KIND",
        help="Argument slot, KIND is word, relaxed, string or greedy (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--comment", default=None, metavar="PREFIX", help="Comment line prefix")
    p.add_argument("--escape", action="store_true", help="Escape each input line instead")
    p.add_argument("--examples", action="store_true", help="List argument kinds and exit")
    p.add_argument("--debug", action="store_true", help="Dump parsed arguments to stderr")
    return p


def parse_arg_spec(s: str) -> ArgumentSpec:
    """Parse a NAME:KIND string, reporting problems as argparse errors."""
    try:
        return parse_argument_spec(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def config_layout(config: dict[str, Any]) -> list[ArgumentSpec]:
    """Return the [layout] arguments of a loaded config (empty if unset)."""
    cfg_layout = config.get("layout")
    if isinstance(cfg_layout, dict):
        cfg_args = cfg_layout.get("arguments")
        if isinstance(cfg_args, list):
            return [parse_arg_spec(str(a)) for a in cfg_args]
    return []


def config_comment(config: dict[str, Any]) -> str:
    """Return the [script] comment prefix of a loaded config."""
    cfg_script = config.get("script")
    if isinstance(cfg_script, dict):
        cfg_comment = cfg_script.get("comment")
        if isinstance(cfg_comment, str):
            return cfg_comment
    return DEFAULT_COMMENT


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input) if args.input and args.input != "-" else None
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Layout: config < CLI (CLI replaces the whole layout)
    arguments = config_layout(config)
    if args.arg:
        arguments = [parse_arg_spec(raw) for raw in args.arg]

    try:
        check_layout(arguments)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc

    # Comment prefix: default < config < CLI
    comment = config_comment(config)
    if args.comment is not None:
        comment = args.comment

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        arguments=arguments,
        comment=comment,
        escape=args.escape,
        examples=args.examples,
        debug=args.debug,
    )


def process_source(options: CliOptions, source: str) -> tuple[str, list[ScriptIssue]]:
    """Parse every command in *source*, returning JSON lines and any failures."""
    from strarg.debug import dump_context, dump_parts

    if options.escape:
        return "".join(escape_if_required(line) + "\n" for line in source.splitlines()), []

    out: list[str] = []
    issues: list[ScriptIssue] = []
    for number, line in iter_commands(source, options.comment):
        try:
            if options.arguments:
                context = parse_command(line, options.arguments)
                if options.debug:
                    dump_context(context, options.arguments)
                values = {name: arg.result for name, arg in context.arguments.items()}
                record: dict[str, Any] = {"line": number, "arguments": values}
            else:
                parts = split_line(line)
                if options.debug:
                    dump_parts(line, parts)
                record = {"line": number, "parts": parts}
        except CommandSyntaxError as exc:
            issues.append(ScriptIssue(number, exc))
            continue
        out.append(json.dumps(record, ensure_ascii=False) + "\n")
    return "".join(out), issues


def list_examples(options: CliOptions) -> str:
    """Render the argument kinds, and the layout usage when one is set."""
    lines = [format_examples(StringArgumentType(t)) for t in StringType]
    if options.arguments:
        lines.append(f"usage: {format_usage(options.arguments)}")
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.examples:
        sys.stdout.write(list_examples(options))
        return 0

    if args.input is None:
        print("error: no input given (use '-' for stdin)", file=sys.stderr)
        return 2

    if options.input_file is None:
        source = sys.stdin.read()
        filename = "<stdin>"
    else:
        try:
            source = options.input_file.read_text(encoding="utf-8")
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        filename = str(options.input_file)

    output, issues = process_source(options, source)
    if issues:
        for issue in issues:
            print(issue.format(filename), file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0


def run() -> None:
    sys.exit(main())
