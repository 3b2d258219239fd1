"""Command-line driver for the Lox scanner: script runner and REPL."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loxscan.errors import format_context, report
from loxscan.scanner import Scanner
from loxscan.tokens import LexicalError, Token

# sysexits.h codes, as used by the reference Lox drivers
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

FORMATS = ("text", "json")
CONFIG_NAME = "loxscan.toml"


class ConfigError(Exception):
    """Raised when the config file cannot be read or holds invalid values."""


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    script: Path | None
    output_format: str
    prompt: str
    context: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan a Lox script (or REPL input) and print its tokens",
    )
    p.add_argument("script", nargs="?", help="Lox script to scan (default: start a REPL)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument("--prompt", default=None, help='REPL prompt (default: "> ")')
    p.add_argument(
        "--context",
        action="store_true",
        default=None,
        help="Show the offending source line under each error",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump the token table to stderr")
    return p


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file {path}: {exc}") from exc


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    script = Path(args.script) if args.script else None
    base_dir = script.parent if script is not None else Path(".")
    if not base_dir.parts:
        base_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir)

    output_format = "text"
    cfg_format = config.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise ConfigError(
                f"invalid format {cfg_format!r} in config (expected one of {', '.join(FORMATS)})"
            )
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    prompt = "> "
    cfg_prompt = config.get("prompt")
    if isinstance(cfg_prompt, str):
        prompt = cfg_prompt
    if args.prompt is not None:
        prompt = args.prompt

    context = False
    cfg_context = config.get("context")
    if isinstance(cfg_context, bool):
        context = cfg_context
    if args.context is not None:
        context = args.context

    return CliOptions(
        script=script,
        output_format=output_format,
        prompt=prompt,
        context=context,
        debug=args.debug,
    )


def format_token(token: Token, output_format: str = "text") -> str:
    """Render one token as a line of driver output."""
    if output_format == "json":
        return json.dumps(
            {
                "type": token.type.name,
                "lexeme": token.lexeme,
                "literal": token.literal,
                "line": token.line,
            }
        )
    return str(token)


def run(source: str, options: CliOptions, filename: str = "<stdin>") -> bool:
    """Scan source, report errors as they occur, then print the tokens.

    Returns True if any lexical error was reported.
    """
    from loxscan.debug import dump_tokens

    tokens: list[Token] = []
    errors: list[LexicalError] = []

    def on_error(error: LexicalError) -> None:
        errors.append(error)
        print(report(error), file=sys.stderr)
        if options.context:
            print(format_context(error, source, filename), file=sys.stderr)

    Scanner(source).scan(tokens.append, on_error)

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    for token in tokens:
        print(format_token(token, options.output_format))

    return bool(errors)


def run_file(path: Path, options: CliOptions) -> int:
    """Scan a script file. Returns EX_DATAERR if it had lexical errors."""
    # Raw bytes keep \r intact; undecodable bytes become U+FFFD and scan as errors.
    try:
        source = path.read_bytes().decode("utf-8", errors="replace")
    except OSError as exc:
        print(f"error: cannot read {path}: {exc}", file=sys.stderr)
        return EX_NOINPUT

    if run(source, options, str(path)):
        return EX_DATAERR
    return EX_OK


def run_prompt(options: CliOptions) -> int:
    """Read-scan-print loop over stdin; errors never carry over between lines."""
    while True:
        sys.stdout.write(options.prompt)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            break
        run(line.rstrip("\n"), options)
    return EX_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/64/65/66). Does not call sys.exit()."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse exits 0 for --help and 2 for usage errors
        return EX_OK if not exc.code else EX_USAGE

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EX_USAGE

    if options.script is None:
        return run_prompt(options)
    return run_file(options.script, options)
