"""
Single entry point: source text in, value and canonical rendering out.
"""

from __future__ import annotations

from typing import NamedTuple

from calcrepr.core.config import IntegerPolicy
from calcrepr.core.errors import ExpressionTooDeep
from calcrepr.core.expression_lang.evaluator import compute
from calcrepr.core.expression_lang.parser import parse_expr
from calcrepr.core.expression_lang.renderer import render


class Evaluation(NamedTuple):
    """Result of evaluating one expression."""

    value: int
    rendered: str


def evaluate(source: str, policy: IntegerPolicy | None = None) -> Evaluation:
    """Parse ``source`` completely, then compute and render it.

    Raises:
        CalcError: On the first tokenize, parse, or evaluation failure.
        ExpressionTooDeep: If parentheses nest beyond the interpreter stack.
    """
    try:
        expr = parse_expr(source, policy)
        return Evaluation(value=compute(expr, policy), rendered=render(expr))
    except RecursionError as e:
        raise ExpressionTooDeep() from e
