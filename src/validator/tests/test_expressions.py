"""Tests for literal shapes and the arithmetic grammar."""

import pytest

from src.validator.expressions import (
    ExpressionError, identifiers, is_arithmetic, is_integer_literal,
    is_string_literal, parse_arithmetic, tokenize,
)


class TestLiterals:
    @pytest.mark.parametrize("text", ["0", "42", "-7", "007"])
    def test_integer_literals(self, text):
        assert is_integer_literal(text)

    @pytest.mark.parametrize("text", ["", "-", "4.2", "1e3", "+3", "12a", '"5"'])
    def test_not_integer_literals(self, text):
        assert not is_integer_literal(text)

    def test_string_literals(self):
        assert is_string_literal('"Hello World"')
        assert is_string_literal('""')
        assert not is_string_literal("'single'")
        assert not is_string_literal('"open')
        assert not is_string_literal('"a" + "b"')


class TestArithmeticShape:
    def test_operator_makes_arithmetic(self):
        assert is_arithmetic("a + b")
        assert is_arithmetic("x*2")

    def test_quote_disqualifies(self):
        assert not is_arithmetic('"a" + 1')

    def test_bare_name_is_not_arithmetic(self):
        assert not is_arithmetic("total")

    def test_identifiers_in_order_without_duplicates(self):
        assert identifiers("b + a * b - (c / a)") == ["b", "a", "c"]

    def test_numbers_are_not_identifiers(self):
        assert identifiers("1 + 22") == []

    def test_non_ascii_names(self):
        assert identifiers("é + 1") == ["é"]
        assert identifiers("² + 1") == ["²"]

    @pytest.mark.parametrize("expr", ["x2 + 3y", "é * (b1 - 7)", "² + 1"])
    def test_agrees_with_tokenizer(self, expr):
        names = [t.value for t in tokenize(expr) if t.kind == "IDENT"]
        assert identifiers(expr) == names


class TestArithmeticGrammar:
    @pytest.mark.parametrize("expr", [
        "1",
        "a + b",
        "a + b * c - d / e",
        "(a + 1) * (b - 2)",
        "((x))",
        "-a + 3",
        "a * -1",
        "- (a + b)",
    ])
    def test_accepts(self, expr):
        parse_arithmetic(expr)

    @pytest.mark.parametrize("expr", [
        "",
        "a +",
        "* a",
        "(a + b",
        "a + b)",
        "a b",
        "()",
        "2a",
        "a % b",
        "a + 'b'",
    ])
    def test_rejects(self, expr):
        with pytest.raises(ExpressionError):
            parse_arithmetic(expr)

    def test_returns_identifiers(self):
        assert parse_arithmetic("sum + i * (j - 1)") == ["sum", "i", "j"]

    def test_error_carries_position(self):
        with pytest.raises(ExpressionError) as exc_info:
            parse_arithmetic("a + $")
        assert exc_info.value.pos == 4
        assert "at 4" in str(exc_info.value)

    def test_tokenize_ends_with_eof(self):
        kinds = [t.kind for t in tokenize("(a+12)")]
        assert kinds == ["LPAREN", "IDENT", "OP", "NUMBER", "RPAREN", "EOF"]
