"""Intermediate representation for calcrepr expressions."""

from calcrepr.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Negate,
    Number,
    Parenthesized,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Negate",
    "Number",
    "Parenthesized",
]
