"""
Recursive descent parser for calcrepr expressions.

Grammar (precedence low to high, binary operators left-associative):
    expression  → term (("+"|"-") term)*
    term        → factor (("*"|"/") factor)*
    factor      → INT | "-" INT | "(" expression ")"

Each rule returns the subtree it built together with the first token it
did not consume (None when the stream is exhausted). The caller uses that
pending token to decide whether to keep folding or to return upward.
There is no backtracking and no error recovery.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from calcrepr.core.config import IntegerPolicy
from calcrepr.core.errors import (
    TrailingInput,
    UnbalancedParenthesis,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from calcrepr.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from calcrepr.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Negate,
    Number,
    Parenthesized,
)

logger = logging.getLogger(__name__)

_ADDITIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}
_MULTIPLICATIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}

Parsed = tuple[Expr, Token | None]


def _number(tok: Token) -> Number:
    assert tok.value is not None
    return Number(value=tok.value, digits=tok.text)


class _Parser:
    """Recursive descent parser pulling tokens one at a time."""

    def __init__(self, tokens: Iterator[Token]) -> None:
        self.tokens = tokens

    def advance(self) -> Token | None:
        return next(self.tokens, None)

    # -- Grammar rules --

    def parse_expression(self) -> Parsed:
        """term (('+' | '-') term)*"""
        return self._fold(self.parse_term, _ADDITIVE_OPS)

    def parse_term(self) -> Parsed:
        """factor (('*' | '/') factor)*"""
        return self._fold(self.parse_factor, _MULTIPLICATIVE_OPS)

    def _fold(self, operand: Callable[[], Parsed], ops: dict[TokenKind, BinaryOp]) -> Parsed:
        left, pending = operand()
        while pending is not None and pending.kind in ops:
            op = ops[pending.kind]
            right, pending = operand()
            left = BinaryExpr(op=op, left=left, right=right)
        return left, pending

    def parse_factor(self) -> Parsed:
        """INT | '-' INT | '(' expression ')'"""
        tok = self.advance()
        if tok is None:
            raise UnexpectedEndOfInput()

        if tok.kind == TokenKind.INT:
            return _number(tok), self.advance()

        # Unary minus applies to a literal only
        if tok.kind == TokenKind.MINUS:
            operand = self.advance()
            if operand is None:
                raise UnexpectedEndOfInput("a number after '-'")
            if operand.kind != TokenKind.INT:
                raise UnexpectedToken(
                    operand, f"Expected a number after '-', got {operand}"
                )
            return Negate(operand=_number(operand)), self.advance()

        if tok.kind == TokenKind.LPAREN:
            inner, pending = self.parse_expression()
            if pending is None or pending.kind != TokenKind.RPAREN:
                raise UnbalancedParenthesis(pending)
            return Parenthesized(inner=inner), self.advance()

        raise UnexpectedToken(tok, f"Illegal factor: {tok}")


def parse_expr(source: str, policy: IntegerPolicy | None = None) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "12 + 34 * (5 - 6)")
        policy: Integer policy applied to literals.

    Returns:
        Parsed expression AST.

    Raises:
        InvalidCharacter: If tokenization fails.
        ParseError: If the expression is invalid or followed by extra tokens.
        IntegerOverflow: If a literal does not fit the policy.
    """
    parser = _Parser(tokenize(source, policy))
    expr, pending = parser.parse_expression()

    # Ensure all tokens consumed
    if pending is not None:
        raise TrailingInput(pending)

    logger.debug("Parsed %r", source)
    return expr
