"""
Error types for calcrepr tokenizing, parsing, and evaluation.

Every failure is fatal to the current evaluation. Nothing in the core
catches these; they surface directly to the caller of ``evaluate``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calcrepr.core.expression_lang.tokenizer import Token


class CalcError(Exception):
    """Base exception for all calcrepr errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# =============================================================================
# Tokenizer
# =============================================================================


class TokenizeError(CalcError):
    """Raised when the source text cannot be split into tokens."""


class InvalidCharacter(TokenizeError):
    """A character outside ``+-*/()``, digits, and whitespace."""

    def __init__(self, index: int, char: str) -> None:
        self.index = index
        self.char = char
        super().__init__(f"Invalid character {char!r} at index {index}")


# =============================================================================
# Parser
# =============================================================================


class ParseError(CalcError):
    """
    Raised when the token stream does not match the grammar.

    Examples:
    - Empty input or a dangling operator
    - A token that cannot start a factor
    - An unclosed parenthesis
    - Tokens left over after a complete expression
    """


class UnexpectedEndOfInput(ParseError):
    """A grammar rule needed a token but the stream was exhausted."""

    def __init__(self, expected: str = "a factor") -> None:
        self.expected = expected
        super().__init__(f"Unexpected end of input, expected {expected}")


class UnexpectedToken(ParseError):
    """A token incompatible with the production being parsed."""

    def __init__(self, token: Token, message: str | None = None) -> None:
        self.token = token
        super().__init__(message or f"Unexpected token {token}")


class TrailingInput(UnexpectedToken):
    """Extra tokens remain after a complete expression."""

    def __init__(self, token: Token) -> None:
        super().__init__(token, f"Extra token after expression: {token}")


class UnbalancedParenthesis(ParseError):
    """An opened group was not closed where ``)`` was expected."""

    def __init__(self, token: Token | None = None) -> None:
        self.token = token
        found = "end of input" if token is None else str(token)
        super().__init__(f"Unbalanced parenthesis: expected ')', got {found}")


# =============================================================================
# Evaluation
# =============================================================================


class EvaluationError(CalcError):
    """Raised while walking a parsed tree."""


class DivisionByZero(EvaluationError):
    def __init__(self) -> None:
        super().__init__("Division by zero")


class IntegerOverflow(CalcError):
    """A literal or result fell outside the configured integer range."""

    def __init__(self, value: int, bits: int) -> None:
        self.value = value
        self.bits = bits
        super().__init__(f"Integer overflow: {value} does not fit in {bits} bits")


class ExpressionTooDeep(CalcError):
    """Parentheses nest deeper than the interpreter stack allows."""

    def __init__(self) -> None:
        super().__init__("Expression nested too deeply")


class ConfigError(CalcError):
    """Raised when a configuration file is malformed."""
