"""Expression tree nodes.

There are four kinds of node: ``Literal``, ``Reference``, ``Roll`` and
``Operation``. Nodes are frozen; ``simplify`` builds new nodes and hands back
the very same object when nothing in the subtree changed, so
``expr.simplify() is expr`` tells a caller that there was nothing to do.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping

from rollex.engine.operators import Operator, apply
from rollex.mechanics.dice import RandomSource, roll_dice
from rollex.models.roll import KeepMode, RollResult

Number = int | float
Context = Mapping[str, Number]


class Expression(ABC):
    """A parsed expression that can be evaluated, simplified and printed."""

    @abstractmethod
    def calc(
        self,
        context: Context | None = None,
        rolls: list[RollResult] | None = None,
        rng: RandomSource | None = None,
    ) -> Number:
        """Fully evaluate the expression.

        Dice are rolled with ``rng`` (``random.random`` by default) and
        variables missing from ``context`` count as 0. When ``rolls`` is a
        list, a ``RollResult`` is appended for every roll, in the order the
        rolls were made.
        """

    @abstractmethod
    def simplify(self, context: Context | None = None) -> Expression:
        """Do the arithmetic that is possible without rolling dice.

        Variables found in ``context`` are replaced by literals first.
        Returns ``self`` if nothing could be simplified.
        """

    def __str__(self) -> str:
        from rollex.engine.printer import render

        return render(self)


@dataclass(frozen=True)
class Literal(Expression):
    value: Number

    def calc(self, context=None, rolls=None, rng=None) -> Number:
        return self.value

    def simplify(self, context=None) -> Expression:
        return self


@dataclass(frozen=True)
class Reference(Expression):
    """A variable. Names may contain letters, digits, "_", "$" and ".",
    but can't start with a digit or a period."""

    name: str

    def calc(self, context=None, rolls=None, rng=None) -> Number:
        if context is None:
            return 0
        return context.get(self.name, 0)

    def simplify(self, context=None) -> Expression:
        if context is not None:
            value = context.get(self.name)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return Literal(value)
        return self


@dataclass(frozen=True)
class Roll(Expression):
    """``dice`` dice with ``sides`` sides, e.g. 3d6.

    With ``keep`` set only the highest ("h") or lowest ("l") die counts,
    so 2d20h is a d20 rolled with advantage.
    """

    dice: int
    sides: int
    keep: KeepMode | None = None

    def __post_init__(self) -> None:
        if self.keep is not None and not isinstance(self.keep, KeepMode):
            object.__setattr__(self, "keep", KeepMode(self.keep))

    def calc(self, context=None, rolls=None, rng=None) -> Number:
        result = roll_dice(self.dice, self.sides, self.keep, rng)
        if rolls is not None:
            rolls.append(result)
        return result.value

    def simplify(self, context=None) -> Expression:
        # Rolling is a side effect, so a roll is never folded.
        return self


@dataclass(frozen=True)
class Operation(Expression):
    """A binary arithmetic operation."""

    op: Operator
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        if not isinstance(self.op, Operator):
            object.__setattr__(self, "op", Operator(self.op))

    def calc(self, context=None, rolls=None, rng=None) -> Number:
        left = self.left.calc(context, rolls, rng)
        right = self.right.calc(context, rolls, rng)
        return apply(self.op, left, right)

    def simplify(self, context=None) -> Expression:
        from rollex.engine.simplifier import simplify_operation

        return simplify_operation(self, context)


def calc(
    expression: Expression,
    context: Context | None = None,
    rolls: list[RollResult] | None = None,
    rng: RandomSource | None = None,
) -> Number:
    """Evaluate ``expression``; see ``Expression.calc``."""
    return expression.calc(context, rolls, rng)
