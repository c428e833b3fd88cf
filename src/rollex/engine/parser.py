"""Recursive descent parser for dice expressions.

Grammar:

    expr   = term   { ("+" | "-") term }
    term   = factor { ("*" | "/") factor }
    factor = SYMBOL | ROLL | NUMBER | "(" expr ")"

Operators of the same precedence associate to the left.
"""
from __future__ import annotations

import logging
from typing import Callable

from rollex.engine.lexer import TokenStream
from rollex.engine.nodes import Expression, Operation
from rollex.engine.operators import Operator
from rollex.errors import ExpressionSyntaxError

logger = logging.getLogger(__name__)

_Rule = Callable[[TokenStream], Expression]


def parse(text: str) -> Expression:
    """Parse ``text`` into an Expression.

    Raises ExpressionSyntaxError if the text isn't a complete, valid
    expression.
    """
    tokens = TokenStream(text.strip())
    expr = _parse_expr(tokens)
    tok = tokens.next_token()
    if tok is not None:
        raise ExpressionSyntaxError(
            f"Unexpected token: {tok} after {expr}", tokens.remainder, tokens.offset,
        )
    logger.debug("Parsed %r as %s", text, expr)
    return expr


def _binary_level(operators: tuple[Operator, Operator], operand: _Rule) -> _Rule:
    """Build the rule for one level of left-associative binary operators."""

    def rule(tokens: TokenStream) -> Expression:
        left = operand(tokens)
        tok = tokens.peek()
        while isinstance(tok, str) and tok in operators:
            next(tokens)
            right = operand(tokens)
            left = Operation(Operator(tok), left, right)
            tok = tokens.peek()
        return left

    return rule


def _parse_factor(tokens: TokenStream) -> Expression:
    tok = tokens.next_token()
    if tok is None:
        raise ExpressionSyntaxError("Incomplete expression", tokens.text, len(tokens.text))
    if isinstance(tok, str):
        if tok == "(":
            start = tokens.offset
            expr = _parse_expr(tokens)
            if tokens.next_token() != ")":
                raise ExpressionSyntaxError("Unmatched parenthesis", tokens.text[start:], start)
            return expr
        raise ExpressionSyntaxError(f'Unexpected operator "{tok}"', tokens.remainder, tokens.offset)
    return tok


_parse_term = _binary_level((Operator.MUL, Operator.DIV), _parse_factor)
_parse_expr = _binary_level((Operator.ADD, Operator.SUB), _parse_term)
