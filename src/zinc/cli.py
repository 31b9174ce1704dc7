"""Command-line interface for Zinc."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from zinc import __version__, diagnostics
from zinc.config import Settings
from zinc.errors import LexError
from zinc.tokens import Token

NAME = "zinc"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    settings: Settings
    unknown_args: list[str]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog=NAME,
        description="Zinc language compiler",
        allow_abbrev=False,
    )
    p.add_argument("input", nargs="?", help="Input source file")
    p.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{NAME} (ZINC) {__version__}",
        help="Print the version of ZINC",
    )
    p.add_argument(
        "--vb",
        "--verbose",
        dest="verbose",
        action="store_true",
        help="Print verbose logs",
    )
    p.add_argument(
        "--pt",
        "--print-tokens",
        dest="print_tokens",
        action="store_true",
        help="Print the output of the tokenizer",
    )
    p.add_argument(
        "--nc",
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable color output",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover zinc.toml)",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "zinc.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _config_flag(config: dict[str, Any], key: str, cli_value: bool) -> bool:
    if cli_value:
        return True
    value = config.get(key)
    return value if isinstance(value, bool) else False


def resolve_options(args: argparse.Namespace, unknown: list[str] | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input) if args.input else None
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    settings = Settings(
        verbose=_config_flag(config, "verbose", args.verbose),
        print_tokens=_config_flag(config, "print_tokens", args.print_tokens),
        no_color=_config_flag(config, "no_color", args.no_color),
    )

    return CliOptions(
        input_file=input_file,
        settings=settings,
        unknown_args=list(unknown or []),
    )


def tokenize_file(options: CliOptions) -> list[Token]:
    """Read the input file and tokenize it."""
    from zinc.lexer import Lexer

    if options.input_file is None:
        raise ValueError("no input file")
    source = options.input_file.read_text(encoding="utf-8")
    return Lexer(source, options.settings).tokenize()


def _report_mode(settings: Settings) -> None:
    diagnostics.verbose("Running in verbose mode.", settings)
    if settings.no_color:
        diagnostics.verbose("Running without color output.", settings)
    if settings.print_tokens:
        diagnostics.verbose("Printing generated tokens set to `true`", settings)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    from zinc.debug import dump_tokens

    parser = build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as exc:
        # --version, --help and usage errors
        return exc.code if isinstance(exc.code, int) else 2

    try:
        options = resolve_options(args, unknown)
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    settings = options.settings
    for arg in options.unknown_args:
        diagnostics.warn(f"Unknown argument `{arg}`", settings)
    _report_mode(settings)

    if options.input_file is None:
        print(
            f"{NAME}: fatal error: No input file(s). Type --help for usage.",
            file=sys.stderr,
        )
        return 2

    diagnostics.verbose(f"Absolute source file path: {options.input_file.resolve()}", settings)

    try:
        tokens = tokenize_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        diagnostics.err(f"Failed to read file contents due to error {exc}", settings)
        print(f"{NAME}: fatal error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 1
    except LexError as exc:
        diagnostics.err(
            f"Failed to tokenize source file contents due to error {exc.message}", settings
        )
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1

    if settings.print_tokens:
        dump_tokens(tokens)

    return 0
