"""Algebraic simplification of expression trees. No dice are rolled."""
from __future__ import annotations

import logging

from rollex.engine.nodes import Context, Expression, Literal, Number, Operation
from rollex.engine.operators import Operator, apply

logger = logging.getLogger(__name__)


def simplify(expression: Expression, context: Context | None = None) -> Expression:
    """Simplify ``expression``, substituting any variables found in ``context``."""
    result = expression.simplify(context)
    if result is expression:
        logger.debug("Nothing to simplify in %s", expression)
    else:
        logger.debug("Simplified %s to %s", expression, result)
    return result


def simplify_operation(node: Operation, context: Context | None = None) -> Expression:
    left = node.left.simplify(context)
    right = node.right.simplify(context)

    if isinstance(left, Literal) and isinstance(right, Literal):
        return Literal(apply(node.op, left.value, right.value))

    if (
        isinstance(right, Literal)
        and isinstance(left, Operation)
        and left.op.precedence == node.op.precedence
        and isinstance(left.right, Literal)
    ):
        return merge_left(left.left, left.op, left.right.value, node.op, right.value)

    # TODO: fold identity operands (x + 0, x * 1, x / 1)
    if left is node.left and right is node.right:
        return node
    return Operation(node.op, left, right)


def merge_left(
    far_left: Expression,
    left_op: Operator,
    left: Number,
    right_op: Operator,
    right: Number,
) -> Expression:
    """Rewrite ``far_left left_op left right_op right`` as ``far_left op value``.

    ``left_op`` and ``right_op`` must have the same precedence. When the
    operators differ, the one written before the larger literal is kept and
    the literals are combined by difference or quotient; equal literals
    cancel and leave ``far_left`` alone.
    """
    if left_op is right_op:
        if left_op.is_additive:
            return Operation(left_op, far_left, Literal(apply(Operator.ADD, left, right)))
        return Operation(left_op, far_left, Literal(apply(Operator.MUL, left, right)))

    if left == right:
        return far_left

    if left > right:
        op, bigger, smaller = left_op, left, right
    else:
        op, bigger, smaller = right_op, right, left

    if op.is_additive:
        return Operation(op, far_left, Literal(apply(Operator.SUB, bigger, smaller)))
    return Operation(op, far_left, Literal(apply(Operator.DIV, bigger, smaller)))
