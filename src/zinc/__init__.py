"""Zinc language compiler front end."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zinc.config import Settings
    from zinc.tokens import Token

__version__ = "0.0.1.dev0"


def tokenize(source: str, settings: Settings | None = None) -> list[Token]:
    """Tokenize Zinc source text into a list of tokens ending in EOF."""
    from zinc.lexer import tokenize as _tokenize

    return _tokenize(source, settings)
