"""Test one/two-character operators, slash, and line comments."""

import pytest

from loxscan.tokens import TokenType

from .conftest import assert_lexemes, assert_lines, assert_types


class TestEqualOperators:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("!", TokenType.BANG),
            ("!=", TokenType.BANG_EQUAL),
            ("=", TokenType.EQUAL),
            ("==", TokenType.EQUAL_EQUAL),
            ("<", TokenType.LESS),
            ("<=", TokenType.LESS_EQUAL),
            (">", TokenType.GREATER),
            (">=", TokenType.GREATER_EQUAL),
        ],
    )
    def test_operator(self, lex, source, expected):
        tokens = lex(source)
        assert_types(tokens, [expected])
        assert tokens[0].lexeme == source

    def test_mixed_run(self, lex):
        tokens = lex("!=<=>=! = < >")
        assert_types(
            tokens,
            [
                TokenType.BANG_EQUAL,
                TokenType.LESS_EQUAL,
                TokenType.GREATER_EQUAL,
                TokenType.BANG,
                TokenType.EQUAL,
                TokenType.LESS,
                TokenType.GREATER,
            ],
        )

    def test_triple_equal_is_longest_match_then_single(self, lex):
        tokens = lex("===")
        assert_types(tokens, [TokenType.EQUAL_EQUAL, TokenType.EQUAL])

    def test_space_breaks_two_char_operator(self, lex):
        tokens = lex("< =")
        assert_types(tokens, [TokenType.LESS, TokenType.EQUAL])

    def test_operator_at_end_of_input(self, lex):
        tokens = lex("a >")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.GREATER])


class TestSlash:
    def test_lone_slash(self, lex):
        tokens = lex("/")
        assert_types(tokens, [TokenType.SLASH])

    def test_division(self, lex):
        tokens = lex("a / b")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.SLASH, TokenType.IDENTIFIER])


class TestComments:
    def test_comment_only(self, scan_source):
        result = scan_source("// nothing to see")
        assert_types(result.tokens, [TokenType.EOF])
        assert result.errors == []

    def test_comment_line_contributes_nothing(self, lex):
        tokens = lex("// anything @ \"\nvar")
        assert_types(tokens, [TokenType.VAR])
        assert_lines(tokens, [2])

    def test_trailing_comment(self, lex):
        tokens = lex("x = 1; // set x\ny")
        assert_lexemes(tokens, ["x", "=", "1", ";", "y"])
        assert_lines(tokens, [1, 1, 1, 1, 2])

    def test_comment_keeps_newline_for_line_count(self, scan_source):
        result = scan_source("//a\n//b\n//c\n")
        assert result.tokens[-1].line == 4

    def test_slash_then_comment(self, lex):
        tokens = lex("/ // trailing")
        assert_types(tokens, [TokenType.SLASH])
