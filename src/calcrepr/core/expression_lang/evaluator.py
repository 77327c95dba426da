"""
Expression evaluator for calcrepr.

Tree-walking interpreter over the closed AST. Integer arithmetic only;
division truncates toward zero. Every intermediate result is passed
through the integer policy.
"""

from __future__ import annotations

import logging

from calcrepr.core.config import DEFAULT_POLICY, IntegerPolicy
from calcrepr.core.errors import DivisionByZero, EvaluationError
from calcrepr.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Negate,
    Number,
    Parenthesized,
)

logger = logging.getLogger(__name__)


def compute(expr: Expr, policy: IntegerPolicy | None = None) -> int:
    """Evaluate an expression tree to an integer.

    Args:
        expr: Parsed expression AST.
        policy: Integer width and overflow handling. Defaults to 32-bit checked.

    Returns:
        The computed value.

    Raises:
        DivisionByZero: If a divisor evaluates to zero.
        IntegerOverflow: If a result does not fit the policy.
    """
    value = _interpret(expr, policy or DEFAULT_POLICY)
    logger.debug("Computed %d", value)
    return value


def _interpret(expr: Expr, policy: IntegerPolicy) -> int:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Number):
        return expr.value

    if isinstance(expr, Negate):
        return policy.fit(-_interpret(expr.operand, policy))

    if isinstance(expr, Parenthesized):
        return _interpret(expr.inner, policy)

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr, policy)

    raise EvaluationError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_binary(expr: BinaryExpr, policy: IntegerPolicy) -> int:
    """Evaluate a left-leaning operator chain, leftmost operand first.

    The parser folds ``a + b + c`` into a left spine as deep as the chain is
    long, so the spine is walked with a loop rather than by recursion.
    """
    spine: list[BinaryExpr] = []
    node: Expr = expr
    while isinstance(node, BinaryExpr):
        spine.append(node)
        node = node.left

    acc = _interpret(node, policy)
    for link in reversed(spine):
        acc = _apply(link.op, acc, _interpret(link.right, policy), policy)
    return acc


def _apply(op: BinaryOp, left: int, right: int, policy: IntegerPolicy) -> int:
    if op == BinaryOp.ADD:
        return policy.fit(left + right)
    if op == BinaryOp.SUB:
        return policy.fit(left - right)
    if op == BinaryOp.MUL:
        return policy.fit(left * right)
    if op == BinaryOp.DIV:
        if right == 0:
            raise DivisionByZero()
        return policy.fit(_truncating_div(left, right))

    raise EvaluationError(f"Unknown binary op: {op}")


def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient
