"""Compiler settings shared by the lexer, diagnostics and CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Settings:
    """Flags passed to the compiler.

    ``verbose`` gates all diagnostics output, ``print_tokens`` asks the driver
    to dump the token stream, and ``no_color`` disables ANSI colouring.
    """

    verbose: bool = False
    print_tokens: bool = False
    no_color: bool = False
