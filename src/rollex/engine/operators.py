"""Binary operators and their precedence."""
from __future__ import annotations

import math
from enum import Enum


class Operator(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self]

    @property
    def is_additive(self) -> bool:
        return self in (Operator.ADD, Operator.SUB)


PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 0,
    Operator.SUB: 0,
    Operator.MUL: 1,
    Operator.DIV: 1,
}

PUNCTUATION = frozenset({"+", "-", "*", "/", "(", ")"})


def _as_float(value: float) -> float:
    """Convert to float, with ints too large for a float becoming +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _apply(op: Operator, left: float, right: float) -> float:
    if op is Operator.ADD:
        return left + right
    if op is Operator.SUB:
        return left - right
    if op is Operator.MUL:
        return left * right
    if right == 0:
        if left == 0 or (isinstance(left, float) and math.isnan(left)):
            return math.nan
        return math.copysign(math.inf, _as_float(left)) * math.copysign(1.0, right)
    return left / right


def apply(op: Operator, left: float, right: float) -> float:
    """Perform one binary operation.

    Division is true division; dividing by zero gives inf, -inf or nan
    instead of raising. Results out of float range become inf or -inf.
    """
    try:
        return _apply(op, left, right)
    except OverflowError:
        if op is Operator.DIV and isinstance(left, int) and isinstance(right, int):
            return math.inf if (left > 0) == (right > 0) else -math.inf
        return _apply(op, _as_float(left), _as_float(right))
