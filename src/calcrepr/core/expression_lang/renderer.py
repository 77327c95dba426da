"""
Canonical rendering of calcrepr expression trees.

Every operator application is wrapped in angle brackets so precedence is
explicit regardless of how the source was written:

    1 + 2 * 3     → <1+<2*3>>
    (1 + 2) * 3   → <(<1+2>)*3>
    -4            → <-4>

Source parentheses are kept as ( ... ). Reading the output back with
<...> treated as ordinary parentheses gives the same value.
"""

from __future__ import annotations

from calcrepr.core.errors import CalcError
from calcrepr.core.ir.expressions import BinaryExpr, Expr, Negate, Number, Parenthesized


def render(expr: Expr) -> str:
    """Render an expression tree in canonical bracketed form."""
    if isinstance(expr, Number):
        # Literals keep their source digits even when the policy wrapped the value
        return expr.digits if expr.digits is not None else str(expr.value)

    if isinstance(expr, Negate):
        return f"<-{render(expr.operand)}>"

    if isinstance(expr, Parenthesized):
        return f"({render(expr.inner)})"

    if isinstance(expr, BinaryExpr):
        return _render_chain(expr)

    raise CalcError(f"Unknown expression type: {type(expr).__name__}")


def _render_chain(expr: BinaryExpr) -> str:
    """Render a left-leaning operator chain without recursing down its spine."""
    spine: list[BinaryExpr] = []
    node: Expr = expr
    while isinstance(node, BinaryExpr):
        spine.append(node)
        node = node.left

    parts = ["<" * len(spine), render(node)]
    for link in reversed(spine):
        parts.extend((link.op.value, render(link.right), ">"))
    return "".join(parts)
