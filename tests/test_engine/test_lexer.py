"""Tests for src/rollex/engine/lexer.py."""
from __future__ import annotations

import pytest

from rollex.engine.lexer import TokenStream, tokenize
from rollex.engine.nodes import Literal, Reference, Roll
from rollex.errors import ExpressionSyntaxError
from rollex.models.roll import KeepMode


class TestTokenize:
    def test_mixed_expression(self):
        tokens = list(tokenize("2d20h + DEX - 1"))
        assert tokens == [
            Roll(2, 20, KeepMode.HIGHEST), "+", Reference("DEX"), "-", Literal(1),
        ]

    def test_whitespace_everywhere(self):
        tokens = list(tokenize(" \t(a\n*\r\n3 ) \v"))
        assert tokens == ["(", Reference("a"), "*", Literal(3), ")"]

    def test_empty_input(self):
        assert list(tokenize("")) == []
        assert list(tokenize("   ")) == []

    @pytest.mark.parametrize("text, expected", [
        ("4", 4),
        ("0", 0),
        ("1.25", 1.25),
        ("-7", -7),
        ("-0.5", -0.5),
    ])
    def test_numbers(self, text, expected):
        [token] = tokenize(text)
        assert isinstance(token, Literal)
        assert token.value == expected

    def test_integer_literal_stays_int(self):
        [token] = tokenize("12")
        assert type(token.value) is int

    @pytest.mark.parametrize("name", [
        "foo", "foo.bar", "foo_bar", "$expr", "$expr.FooBar_cat", "_123", "a0", "d20",
    ])
    def test_symbols(self, name):
        assert list(tokenize(name)) == [Reference(name)]

    @pytest.mark.parametrize("text, dice, sides, keep", [
        ("1d20", 1, 20, None),
        ("3d6", 3, 6, None),
        ("2d20h", 2, 20, KeepMode.HIGHEST),
        ("2d20l", 2, 20, KeepMode.LOWEST),
        ("10d100", 10, 100, None),
    ])
    def test_rolls(self, text, dice, sides, keep):
        assert list(tokenize(text)) == [Roll(dice, sides, keep)]

    def test_minus_before_digit_is_a_negative_literal(self):
        assert list(tokenize("a -1")) == [Reference("a"), Literal(-1)]
        assert list(tokenize("a - 1")) == [Reference("a"), "-", Literal(1)]

    def test_number_followed_by_letters_splits(self):
        assert list(tokenize("1foo")) == [Literal(1), Reference("foo")]

    def test_roll_with_trailing_letter_splits(self):
        assert list(tokenize("1d43o")) == [Roll(1, 43), Reference("o")]

    def test_invalid_character(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            list(tokenize("f;3d3"))
        assert exc_info.value.text == ";3d3"
        assert exc_info.value.position == 1
        assert "Unexpected input: ;3d3" in str(exc_info.value)

    def test_error_is_lazy(self):
        tokens = tokenize("a + #")
        assert next(tokens) == Reference("a")
        assert next(tokens) == "+"
        with pytest.raises(ExpressionSyntaxError):
            next(tokens)

    @pytest.mark.parametrize("text", ["0d6", "2d0"])
    def test_zero_dice_rejected(self, text):
        with pytest.raises(ExpressionSyntaxError, match="Invalid dice roll"):
            list(tokenize(text))

    def test_oversized_integer_rejected(self):
        text = "a + " + "1" * 5000
        with pytest.raises(ExpressionSyntaxError, match="Invalid number") as exc_info:
            list(tokenize(text))
        assert exc_info.value.position == 4
        assert exc_info.value.text == "1" * 5000

    def test_oversized_dice_count_rejected(self):
        with pytest.raises(ExpressionSyntaxError, match="Invalid number"):
            list(tokenize("1" * 5000 + "d6"))

    def test_long_integer_within_limit_kept(self):
        [token] = tokenize("1" + "0" * 400)
        assert token.value == 10 ** 400

    def test_syntax_error_is_value_error(self):
        with pytest.raises(ValueError):
            list(tokenize("@"))


class TestTokenStream:
    def test_peek_does_not_consume(self):
        stream = TokenStream("a + b")
        assert stream.peek() == Reference("a")
        assert stream.peek() == Reference("a")
        assert next(stream) == Reference("a")
        assert stream.peek() == "+"

    def test_next_consumes_one(self):
        stream = TokenStream("1 * 2")
        assert [next(stream), next(stream), next(stream)] == [Literal(1), "*", Literal(2)]
        assert stream.peek() is None
        assert stream.next_token() is None
        with pytest.raises(StopIteration):
            next(stream)

    def test_iterates(self):
        assert list(TokenStream("(x)")) == ["(", Reference("x"), ")"]

    def test_offset_and_remainder(self):
        stream = TokenStream("ab + cd")
        next(stream)
        next(stream)
        assert stream.offset == 3
        assert stream.remainder == "+ cd"
