"""--print-tokens dump of the token stream."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from zinc.tokens import Token


def format_token(token: Token) -> str:
    """Return a one-line, human-readable rendering of *token*."""
    if token.text is None:
        return f"Token({token.kind.name}, line={token.line})"
    return f"Token({token.kind.name}, {token.text!r}, line={token.line})"


def dump_tokens(tokens: Iterable[Token], *, file: TextIO | None = None) -> None:
    """Print one line per token to *file* (stdout by default)."""
    f = file if file is not None else sys.stdout
    for token in tokens:
        f.write(format_token(token) + "\n")
