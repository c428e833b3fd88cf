"""Errors raised while reading expressions."""
from __future__ import annotations


class ExpressionSyntaxError(ValueError):
    """Invalid syntax while parsing an expression.

    ``text`` is the piece of input the error refers to (usually the
    unconsumed remainder) and ``position`` its offset into the stripped
    input, when known.
    """

    def __init__(self, message: str, text: str | None = None, position: int | None = None):
        super().__init__(message)
        self.message = message
        self.text = text
        self.position = position
