"""Error types with formatted source context."""

from __future__ import annotations


class LexError(Exception):
    """Raised on the first lexing error, with line, column and source context."""

    def __init__(self, message: str, line: int, column: int, source: str) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.zn") -> str:
        lines = self.source.split("\n")
        line_idx = self.line - 1
        col = self.column

        # Rows split on "\n" only, matching the lexer's line counter
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class DuplicateDecimalPoint(LexError):
    """A numeric literal contains a second decimal point."""

    def __init__(self, line: int, column: int, source: str) -> None:
        super().__init__(
            f"cannot put two decimal points in a float literal at line {line}",
            line,
            column,
            source,
        )


class InvalidMacroMarker(LexError):
    """An '@' with no macro name after it."""

    def __init__(self, line: int, column: int, source: str) -> None:
        super().__init__(f"invalid '@' usage at line {line}", line, column, source)
