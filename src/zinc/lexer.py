"""Zinc lexer — converts source text into a flat token stream."""

from __future__ import annotations

from collections.abc import Iterator

from zinc import diagnostics
from zinc.config import Settings
from zinc.errors import DuplicateDecimalPoint, InvalidMacroMarker
from zinc.tokens import (
    KEYWORDS,
    MAX_SYMBOL_LEN,
    SYMBOLS,
    Token,
    TokenType,
    is_ident_char,
    is_ident_start,
)


class Lexer:
    """Tokenize Zinc source text into a stream of Token objects.

    A Lexer is built once per source unit and driven by a single call to
    :meth:`tokenize` (or :meth:`iter_tokens`). It holds no shared state, so
    separate instances can run on separate threads.
    """

    def __init__(self, source: str, settings: Settings | None = None) -> None:
        self._source = source
        self._settings = settings if settings is not None else Settings()
        self._pos = 0
        self._line = 1
        self._col = 1
        self._pending: list[Token] = []
        self._started = False

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list, ending in EOF."""
        tokens = list(self.iter_tokens())
        diagnostics.verbose(
            f"Tokenization completed. Lines: {self._line}, Tokens: {len(tokens)}",
            self._settings,
        )
        return tokens

    def iter_tokens(self) -> Iterator[Token]:
        """Yield tokens on demand; the last one is always EOF.

        A Lexer scans its source once; a second scan raises RuntimeError.
        """
        if self._started:
            raise RuntimeError("Lexer has already been used; create a new one per source")
        self._started = True
        while self._pos < len(self._source):
            self._lex_next()
            yield from self._drain()
        self._emit(TokenType.EOF)
        yield from self._drain()

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _emit(self, kind: TokenType, text: str | None = None, line: int | None = None) -> None:
        if line is None:
            line = self._line
        self._pending.append(Token(kind, text, line))

    def _drain(self) -> list[Token]:
        tokens, self._pending = self._pending, []
        return tokens

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_next(self) -> None:
        ch = self._peek()

        if ch == "\n":
            line = self._line
            self._advance()
            self._emit(TokenType.NEWLINE, line=line)
            return

        if ch.isspace():
            self._advance()
            return

        if is_ident_start(ch):
            self._lex_identifier()
            return

        if ch.isdigit():
            self._lex_number()
            return

        if ch == "/":
            self._lex_slash()
            return

        if ch == '"':
            self._lex_quoted('"', TokenType.STRING_LITERAL)
            return

        if ch == "'":
            self._lex_quoted("'", TokenType.CHAR_LITERAL)
            return

        if ch == "@":
            self._lex_macro()
            return

        self._lex_symbol()

    # ------------------------------------------------------------------
    # Identifiers and keywords
    # ------------------------------------------------------------------

    def _lex_identifier(self) -> None:
        chars = []
        while not self._at_end() and is_ident_char(self._peek()):
            chars.append(self._advance())
        text = "".join(chars)
        kind = KEYWORDS.get(text)
        if kind is None:
            self._emit(TokenType.IDENTIFIER, text)
        else:
            self._emit(kind)

    # ------------------------------------------------------------------
    # Numbers, including the decimal point / range / ellipsis overlap
    # ------------------------------------------------------------------

    def _lex_number(self) -> None:
        chars = [self._advance()]
        seen_point = False

        while not self._at_end():
            ch = self._peek()
            if ch.isdigit():
                chars.append(self._advance())
            elif ch == ".":
                if self._peek(1) == ".":
                    # 1..5 or 1...5: the literal stops before the dot run
                    self._emit(TokenType.NUM_LITERAL, "".join(chars))
                    if self._peek(2) == ".":
                        self._skip(3)
                        self._emit(TokenType.ELLIPSIS)
                    else:
                        self._skip(2)
                        self._emit(TokenType.RANGE)
                    return
                if seen_point:
                    raise DuplicateDecimalPoint(self._line, self._col, self._source)
                seen_point = True
                chars.append(self._advance())
            else:
                break

        self._emit(TokenType.NUM_LITERAL, "".join(chars))

    # ------------------------------------------------------------------
    # Slash: comments, divide, divide-assign
    # ------------------------------------------------------------------

    def _lex_slash(self) -> None:
        nxt = self._peek(1)

        if nxt == "/":
            self._skip(2)
            # The terminating newline is consumed here, so no NEWLINE token
            while not self._at_end():
                if self._advance() == "\n":
                    break
            return

        if nxt == "*":
            self._skip(2)
            while not self._at_end():
                if self._peek() == "*" and self._peek(1) == "/":
                    self._skip(2)
                    return
                self._advance()
            return

        if nxt == "=":
            self._skip(2)
            self._emit(TokenType.DIVIDE_EQUAL)
            return

        self._advance()
        self._emit(TokenType.DIVIDE)

    # ------------------------------------------------------------------
    # String and character literals (verbatim, no escapes)
    # ------------------------------------------------------------------

    def _lex_quoted(self, quote: str, kind: TokenType) -> None:
        line = self._line
        chars = [self._advance()]
        while not self._at_end():
            ch = self._advance()
            chars.append(ch)
            if ch == quote:
                break
        self._emit(kind, "".join(chars), line)

    # ------------------------------------------------------------------
    # Macro markers
    # ------------------------------------------------------------------

    def _lex_macro(self) -> None:
        nxt = self._peek(1)
        if not nxt or nxt.isspace():
            raise InvalidMacroMarker(self._line, self._col, self._source)

        chars = [self._advance()]
        while not self._at_end() and not self._peek().isspace():
            chars.append(self._advance())
        self._emit(TokenType.MACRO, "".join(chars))

    # ------------------------------------------------------------------
    # Punctuation and operators
    # ------------------------------------------------------------------

    def _lex_symbol(self) -> None:
        for length in range(MAX_SYMBOL_LEN, 0, -1):
            spelling = self._source[self._pos : self._pos + length]
            kind = SYMBOLS.get(spelling)
            if kind is not None:
                self._skip(len(spelling))
                self._emit(kind)
                return

        # Unrecognised characters are dropped
        self._advance()

    def _skip(self, count: int) -> None:
        for _ in range(count):
            self._advance()


def tokenize(source: str, settings: Settings | None = None) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, settings).tokenize()


def iter_tokens(source: str, settings: Settings | None = None) -> Iterator[Token]:
    """Convenience function: lazily tokenize source text."""
    return Lexer(source, settings).iter_tokens()
