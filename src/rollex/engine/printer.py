"""Canonical text rendering of expression trees."""
from __future__ import annotations

import math
from decimal import Decimal

from rollex.engine.nodes import Expression, Literal, Operation, Reference, Roll
from rollex.engine.operators import Operator


def format_number(value: int | float) -> str:
    """Render a number as plain decimal text, never in exponent notation."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        return format(Decimal(text), "f")
    return text


def _needs_parens(child: Expression, op: Operator, right_side: bool) -> bool:
    if not isinstance(child, Operation):
        return False
    if right_side:
        return child.op.precedence <= op.precedence
    return child.op.precedence < op.precedence


def render(expression: Expression) -> str:
    """Render an expression with the minimum parentheses needed to re-parse it."""
    if isinstance(expression, Literal):
        return format_number(expression.value)
    if isinstance(expression, Reference):
        return expression.name
    if isinstance(expression, Roll):
        keep = expression.keep.value if expression.keep else ""
        return f"{expression.dice}d{expression.sides}{keep}"
    if isinstance(expression, Operation):
        left = render(expression.left)
        if _needs_parens(expression.left, expression.op, right_side=False):
            left = f"({left})"
        right = render(expression.right)
        if _needs_parens(expression.right, expression.op, right_side=True):
            right = f"({right})"
        return f"{left} {expression.op.value} {right}"
    raise TypeError(f"Cannot render {type(expression).__name__}")
