"""Test string and character literals (verbatim, no escape processing)."""

from zinc.lexer import tokenize
from zinc.tokens import Token, TokenType

from tests.conftest import assert_texts, assert_types


class TestStringLiterals:
    def test_simple(self, lex):
        tokens = lex('"Hello, world!"')
        assert_types(tokens, [TokenType.STRING_LITERAL])
        assert_texts(tokens, ['"Hello, world!"'])

    def test_empty(self, lex):
        assert_texts(lex('""'), ['""'])

    def test_no_escape_processing(self, lex):
        tokens = lex(r'"a\nb"')
        assert_texts(tokens, [r'"a\nb"'])

    def test_backslash_does_not_escape_quote(self, lex):
        tokens = lex(r'"a\" b"')
        assert_types(
            tokens,
            [TokenType.STRING_LITERAL, TokenType.IDENTIFIER, TokenType.STRING_LITERAL],
        )
        assert_texts(tokens, [r'"a\"', "b", '"'])

    def test_content_is_not_tokenized(self, lex):
        tokens = lex('"fun // 1.2.3 @"')
        assert_types(tokens, [TokenType.STRING_LITERAL])

    def test_unterminated(self):
        assert tokenize('"abc') == [
            Token(TokenType.STRING_LITERAL, '"abc', 1),
            Token(TokenType.EOF, None, 1),
        ]

    def test_lone_quote(self):
        tokens = tokenize('"')
        assert_types(tokens, [TokenType.STRING_LITERAL, TokenType.EOF])
        assert tokens[0].text == '"'

    def test_in_call(self, lex):
        tokens = lex('println("hi");')
        assert_types(
            tokens,
            [
                TokenType.IDENTIFIER,
                TokenType.LPAREN,
                TokenType.STRING_LITERAL,
                TokenType.RPAREN,
                TokenType.SEMI,
            ],
        )


class TestCharLiterals:
    def test_simple(self, lex):
        tokens = lex("'a'")
        assert_types(tokens, [TokenType.CHAR_LITERAL])
        assert_texts(tokens, ["'a'"])

    def test_assignment(self, lex):
        tokens = lex("char c = 'z';")
        assert_types(
            tokens,
            [
                TokenType.TYPE_CHAR,
                TokenType.IDENTIFIER,
                TokenType.ASSIGN,
                TokenType.CHAR_LITERAL,
                TokenType.SEMI,
            ],
        )

    def test_unterminated(self):
        tokens = tokenize("'q")
        assert tokens == [Token(TokenType.CHAR_LITERAL, "'q", 1), Token(TokenType.EOF, None, 1)]
