from __future__ import annotations

from rollex.engine.nodes import Expression, Literal, Operation, Reference, Roll, calc
from rollex.engine.operators import Operator
from rollex.engine.parser import parse
from rollex.engine.printer import render
from rollex.engine.simplifier import simplify
from rollex.errors import ExpressionSyntaxError
from rollex.models.roll import KeepMode, RollResult

__all__ = [
    "parse",
    "calc",
    "simplify",
    "render",
    "Expression",
    "Literal",
    "Reference",
    "Roll",
    "Operation",
    "Operator",
    "KeepMode",
    "RollResult",
    "ExpressionSyntaxError",
]
