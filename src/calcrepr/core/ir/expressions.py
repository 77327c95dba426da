"""
Expression AST for calcrepr.

A closed set of immutable node types produced by the parser:

- Number: integer literal
- Negate: unary minus applied to a literal
- Parenthesized: explicit grouping from the source text
- BinaryExpr: +, -, *, / with a left and right operand

Each node exclusively owns its children; trees are never shared.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """
    An integer literal.

    ``digits`` holds the source text only when the integer policy wrapped
    the literal, so rendering still shows what was written.
    """

    value: int = Field(description="The literal value")
    digits: str | None = Field(default=None, description="Source digits of a wrapped literal")

    model_config = ConfigDict(frozen=True)


class Negate(BaseModel):
    """Unary minus: -operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)


class Parenthesized(BaseModel):
    """
    A source-level ( ... ) group.

    Evaluates exactly like its inner expression; kept only so rendering can
    show where the source grouped things.
    """

    inner: Expr

    model_config = ConfigDict(frozen=True)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | Negate | Parenthesized | BinaryExpr

# Rebuild models for recursive forward references
Negate.model_rebuild()
Parenthesized.model_rebuild()
BinaryExpr.model_rebuild()
