"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Primitive type keywords
    TYPE_CHAR = auto()  # char
    TYPE_STRING = auto()  # string
    TYPE_BOOL = auto()  # bool
    TYPE_I8 = auto()  # i8
    TYPE_U8 = auto()  # u8
    TYPE_I16 = auto()  # i16
    TYPE_U16 = auto()  # u16
    TYPE_I32 = auto()  # i32
    TYPE_U32 = auto()  # u32
    TYPE_I64 = auto()  # i64
    TYPE_U64 = auto()  # u64
    TYPE_F32 = auto()  # f32
    TYPE_F64 = auto()  # f64

    # Literals (carry text)
    NUM_LITERAL = auto()  # 1, 1.5
    STRING_LITERAL = auto()  # "Hello" (quotes included)
    CHAR_LITERAL = auto()  # 'a' (quotes included)
    IDENTIFIER = auto()

    # Structural keywords
    STRUCT = auto()
    ENUM = auto()
    CONST = auto()
    FUN = auto()
    IF = auto()
    ELSE = auto()
    DO = auto()
    WHILE = auto()
    FOR = auto()
    IN = auto()
    WHEN = auto()
    TRY = auto()
    CATCH = auto()
    THROW = auto()
    RETURN = auto()
    BREAK = auto()
    CONTINUE = auto()
    SWITCH = auto()
    CASE = auto()
    DEFAULT = auto()
    DIVE = auto()  # imports
    BELLYFLOP = auto()  # C imports
    FROM = auto()
    ALIAS = auto()  # type
    MAIN = auto()  # program entry

    # Punctuation
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    COMMA = auto()  # ,
    SEMI = auto()  # ;
    COLON = auto()  # :
    DOUBLE_COLON = auto()  # ::
    POUND = auto()  # #
    DOLLAR = auto()  # $
    QUESTION = auto()  # ?

    # Dot family
    DOT = auto()  # .
    RANGE = auto()  # ..
    ELLIPSIS = auto()  # ...

    # Arithmetic
    ASSIGN = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    ASTERISK = auto()  # *
    DIVIDE = auto()  # /
    MODULO = auto()  # %
    INCREMENT = auto()  # ++
    DECREMENT = auto()  # --
    ARROW = auto()  # ->
    PLUS_EQUAL = auto()  # +=
    MINUS_EQUAL = auto()  # -=
    TIMES_EQUAL = auto()  # *=
    DIVIDE_EQUAL = auto()  # /=
    MODULO_EQUAL = auto()  # %=

    # Comparison
    EQUALS = auto()  # ==
    NOT_EQUALS = auto()  # !=
    LEFT_ANGLE = auto()  # <
    RIGHT_ANGLE = auto()  # >
    LESS_EQUAL = auto()  # <=
    GREATER_EQUAL = auto()  # >=

    # Bitwise
    AMPERSAND = auto()  # &
    BIT_OR = auto()  # |
    BIT_XOR = auto()  # ^
    BIT_NOT = auto()  # ~
    LEFT_SHIFT = auto()  # <<
    RIGHT_SHIFT = auto()  # >>
    BIT_AND_EQUAL = auto()  # &=
    BIT_OR_EQUAL = auto()  # |=
    BIT_XOR_EQUAL = auto()  # ^=
    BIT_NOT_EQUAL = auto()  # ~=
    LEFT_SHIFT_EQUAL = auto()  # <<=
    RIGHT_SHIFT_EQUAL = auto()  # >>=

    # Logical
    AND = auto()  # &&
    OR = auto()  # ||
    BANG = auto()  # !

    MACRO = auto()  # @name
    NEWLINE = auto()
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: kind, lexeme text (literals only), and 1-based line."""

    kind: TokenType
    text: str | None
    line: int


KEYWORDS: dict[str, TokenType] = {
    "char": TokenType.TYPE_CHAR,
    "string": TokenType.TYPE_STRING,
    "bool": TokenType.TYPE_BOOL,
    "i8": TokenType.TYPE_I8,
    "u8": TokenType.TYPE_U8,
    "i16": TokenType.TYPE_I16,
    "u16": TokenType.TYPE_U16,
    "i32": TokenType.TYPE_I32,
    "u32": TokenType.TYPE_U32,
    "i64": TokenType.TYPE_I64,
    "u64": TokenType.TYPE_U64,
    "f32": TokenType.TYPE_F32,
    "f64": TokenType.TYPE_F64,
    "struct": TokenType.STRUCT,
    "enum": TokenType.ENUM,
    "const": TokenType.CONST,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "do": TokenType.DO,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "in": TokenType.IN,
    "when": TokenType.WHEN,
    "try": TokenType.TRY,
    "catch": TokenType.CATCH,
    "throw": TokenType.THROW,
    "return": TokenType.RETURN,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "switch": TokenType.SWITCH,
    "case": TokenType.CASE,
    "default": TokenType.DEFAULT,
    "dive": TokenType.DIVE,
    "bellyflop": TokenType.BELLYFLOP,
    "from": TokenType.FROM,
    "type": TokenType.ALIAS,
    "main": TokenType.MAIN,
}

# Fixed-spelling symbols, matched longest first (3, then 2, then 1 chars).
# '/' is absent: the lexer handles it together with comments.
SYMBOLS: dict[str, TokenType] = {
    "<<=": TokenType.LEFT_SHIFT_EQUAL,
    ">>=": TokenType.RIGHT_SHIFT_EQUAL,
    "...": TokenType.ELLIPSIS,
    "->": TokenType.ARROW,
    "++": TokenType.INCREMENT,
    "--": TokenType.DECREMENT,
    "==": TokenType.EQUALS,
    "!=": TokenType.NOT_EQUALS,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    "<<": TokenType.LEFT_SHIFT,
    ">>": TokenType.RIGHT_SHIFT,
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "+=": TokenType.PLUS_EQUAL,
    "-=": TokenType.MINUS_EQUAL,
    "*=": TokenType.TIMES_EQUAL,
    "%=": TokenType.MODULO_EQUAL,
    "&=": TokenType.BIT_AND_EQUAL,
    "|=": TokenType.BIT_OR_EQUAL,
    "^=": TokenType.BIT_XOR_EQUAL,
    "~=": TokenType.BIT_NOT_EQUAL,
    "::": TokenType.DOUBLE_COLON,
    "..": TokenType.RANGE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ",": TokenType.COMMA,
    ";": TokenType.SEMI,
    ":": TokenType.COLON,
    ".": TokenType.DOT,
    "#": TokenType.POUND,
    "$": TokenType.DOLLAR,
    "?": TokenType.QUESTION,
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "%": TokenType.MODULO,
    "<": TokenType.LEFT_ANGLE,
    ">": TokenType.RIGHT_ANGLE,
    "&": TokenType.AMPERSAND,
    "|": TokenType.BIT_OR,
    "^": TokenType.BIT_XOR,
    "~": TokenType.BIT_NOT,
    "!": TokenType.BANG,
}

MAX_SYMBOL_LEN = max(len(s) for s in SYMBOLS)


def is_ident_start(ch: str) -> bool:
    """Return True if ch can begin an identifier or keyword."""
    return ch.isalpha() or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier or keyword."""
    return ch.isalnum() or ch == "_"
