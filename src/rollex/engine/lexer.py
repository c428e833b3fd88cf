"""Tokenizer for dice expressions.

Tokens (first match wins at each position):

    SYMBOL:  [a-zA-Z_$][a-zA-Z0-9_$.]*      -> Reference
    ROLL:    \\d+d\\d+[hl]?                   -> Roll
    NUMBER:  -?\\d+(\\.\\d+)?                   -> Literal
    PUNCT:   + - * / ( )                     -> the character itself

Whitespace between tokens is skipped.
"""
from __future__ import annotations

import re
from typing import Iterator, Union

from rollex.engine.nodes import Literal, Reference, Roll
from rollex.errors import ExpressionSyntaxError

Token = Union[Reference, Roll, Literal, str]

_WHITESPACE_RE = re.compile(r"\s*")
_TOKEN_RE = re.compile(
    r"(?P<symbol>[a-zA-Z_$][a-zA-Z0-9_$.]*)"
    r"|(?P<dice>\d+)d(?P<sides>\d+)(?P<keep>[hl])?"
    r"|(?P<number>-?\d+(?:\.\d+)?)"
    r"|(?P<punct>[-+*/()])",
    re.ASCII,
)


def _scan(text: str) -> Iterator[tuple[int, Token]]:
    pos = 0
    end = len(text)
    while True:
        pos = _WHITESPACE_RE.match(text, pos).end()
        if pos >= end:
            return
        m = _TOKEN_RE.match(text, pos)
        if not m:
            raise ExpressionSyntaxError(f"Unexpected input: {text[pos:]}", text[pos:], pos)
        yield pos, _make_token(m, pos)
        pos = m.end()


def _make_token(m: re.Match, pos: int) -> Token:
    if m.group("symbol"):
        return Reference(m.group("symbol"))
    try:
        if m.group("dice"):
            dice = int(m.group("dice"))
            sides = int(m.group("sides"))
            if dice < 1 or sides < 1:
                raise ExpressionSyntaxError(f"Invalid dice roll: {m.group(0)}", m.group(0), pos)
            return Roll(dice, sides, m.group("keep"))
        if m.group("number"):
            number = m.group("number")
            return Literal(float(number) if "." in number else int(number))
    except ExpressionSyntaxError:
        raise
    except ValueError:
        # int() refuses strings past the interpreter's digit limit
        raise ExpressionSyntaxError(f"Invalid number: {m.group(0)}", m.string[pos:], pos) from None
    return m.group("punct")


def tokenize(text: str) -> Iterator[Token]:
    """Lazily split ``text`` into tokens.

    Raises ExpressionSyntaxError when the scan reaches input that isn't a
    token.
    """
    for _, token in _scan(text):
        yield token


class TokenStream:
    """Token iterator with one token of lookahead."""

    _EMPTY = object()

    def __init__(self, text: str):
        self.text = text
        self.offset = 0
        self._tokens = _scan(text)
        self._peeked = self._EMPTY

    def __iter__(self) -> TokenStream:
        return self

    def __next__(self) -> Token:
        if self._peeked is not self._EMPTY:
            item, self._peeked = self._peeked, self._EMPTY
        else:
            item = next(self._tokens, None)
        if item is None:
            self.offset = len(self.text)
            raise StopIteration
        self.offset, token = item
        return token

    def peek(self) -> Token | None:
        """Return the next token without consuming it, or None at the end."""
        if self._peeked is self._EMPTY:
            self._peeked = next(self._tokens, None)
        return None if self._peeked is None else self._peeked[1]

    def next_token(self) -> Token | None:
        """Consume one token, returning None at the end of input."""
        return next(self, None)

    @property
    def remainder(self) -> str:
        """Input from the last consumed token onwards."""
        return self.text[self.offset:]
