"""Test whole-stream properties: EOF sentinel, determinism, lazy iteration."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

import zinc
from zinc.config import Settings
from zinc.errors import DuplicateDecimalPoint
from zinc.lexer import Lexer, iter_tokens, tokenize
from zinc.tokens import Token, TokenType

SAMPLE = """\
dive io from std
// entry point
fun main() -> i32 {
    const f64 pi = 3.14159;
    for i in 0..10 {
        @trace i
        x += i << 2;
    }
    /* block
       comment */
    return "done";
}
"""


class TestEofSentinel:
    @pytest.mark.parametrize(
        "source",
        ["", "   ", "\n\n", "// only a comment", "/* unterminated", '"open', SAMPLE],
    )
    def test_exactly_one_eof_last(self, source):
        tokens = tokenize(source)
        kinds = [t.kind for t in tokens]
        assert kinds.count(TokenType.EOF) == 1
        assert kinds[-1] == TokenType.EOF

    def test_empty_source(self):
        assert tokenize("") == [Token(TokenType.EOF, None, 1)]


class TestDeterminism:
    def test_two_lexers_same_output(self):
        assert Lexer(SAMPLE).tokenize() == Lexer(SAMPLE).tokenize()

    def test_threads_independent(self):
        sources = [SAMPLE, "a\nb\nc", "1..5", SAMPLE * 3]
        expected = [tokenize(s) for s in sources]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(tokenize, sources * 5))
        assert results == expected * 5

    def test_package_level_tokenize(self):
        assert zinc.tokenize(SAMPLE) == tokenize(SAMPLE)


class TestIterTokens:
    def test_matches_tokenize(self):
        assert list(iter_tokens(SAMPLE)) == tokenize(SAMPLE)

    def test_is_lazy(self):
        it = iter_tokens("a b")
        first = next(it)
        assert first == Token(TokenType.IDENTIFIER, "a", 1)

    def test_error_raised_when_reached(self):
        it = iter_tokens("ok 1.2.3")
        assert next(it).text == "ok"
        with pytest.raises(DuplicateDecimalPoint):
            next(it)


class TestSample:
    def test_sample_kinds(self):
        kinds = [t.kind for t in tokenize(SAMPLE) if t.kind != TokenType.NEWLINE]
        assert kinds[:4] == [
            TokenType.DIVE,
            TokenType.IDENTIFIER,
            TokenType.FROM,
            TokenType.IDENTIFIER,
        ]
        assert TokenType.MAIN in kinds
        assert TokenType.RANGE in kinds
        assert TokenType.LEFT_SHIFT in kinds
        assert TokenType.PLUS_EQUAL in kinds
        assert TokenType.MACRO in kinds

    def test_sample_lines(self):
        tokens = tokenize(SAMPLE)
        by_kind = {t.kind: t for t in tokens}
        assert by_kind[TokenType.FUN].line == 3
        assert by_kind[TokenType.TYPE_F64].line == 4
        assert by_kind[TokenType.RETURN].line == 11
        assert by_kind[TokenType.EOF].line == 13

    def test_comment_newlines_not_emitted(self):
        tokens = tokenize(SAMPLE)
        newlines = [t for t in tokens if t.kind == TokenType.NEWLINE]
        # 12 source lines, one ends a // comment, one sits inside /* */
        assert len(newlines) == 10


class TestVerboseDiagnostic:
    def test_silent_by_default(self, capsys):
        tokenize("a b")
        assert capsys.readouterr().out == ""

    def test_reports_counts(self, capsys):
        Lexer("a\nb", Settings(verbose=True, no_color=True)).tokenize()
        out = capsys.readouterr().out
        assert out == "[VERBOSE] Tokenization completed. Lines: 2, Tokens: 4\n"

    def test_does_not_change_tokens(self, capsys):
        loud = Lexer(SAMPLE, Settings(verbose=True)).tokenize()
        assert loud == tokenize(SAMPLE)


class TestSingleUse:
    def test_second_tokenize_raises(self):
        lexer = Lexer("a\nb")
        assert lexer.tokenize()[-1] == Token(TokenType.EOF, None, 2)
        with pytest.raises(RuntimeError, match="already been used"):
            lexer.tokenize()

    def test_second_iteration_raises(self):
        lexer = Lexer("x")
        list(lexer.iter_tokens())
        with pytest.raises(RuntimeError):
            next(lexer.iter_tokens())
