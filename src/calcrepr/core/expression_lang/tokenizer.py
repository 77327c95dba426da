"""
Tokenizer for calcrepr arithmetic expressions.

Converts an expression string into a lazy stream of typed tokens. Tokens
are produced one at a time as the parser asks for them; an invalid
character is reported only when the stream reaches it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import StrEnum, auto

from calcrepr.core.config import DEFAULT_POLICY, IntegerPolicy
from calcrepr.core.errors import InvalidCharacter

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Literals
    INT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()


class Token:
    """
    A single token from the expression tokenizer.

    ``text`` keeps the source digits of an INT whose value the integer
    policy changed; it is None otherwise and never affects equality.
    """

    __slots__ = ("kind", "value", "pos", "text")

    def __init__(
        self,
        kind: TokenKind,
        value: int | None = None,
        pos: int = 0,
        text: str | None = None,
    ) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos
        self.text = text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __str__(self) -> str:
        if self.kind == TokenKind.INT:
            return f"{self.value}"
        return repr(_SYMBOLS[self.kind])

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_SINGLE_MAP: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}
_SYMBOLS: dict[TokenKind, str] = {kind: char for char, kind in _SINGLE_MAP.items()}

_DIGITS = "0123456789"


class Tokenizer(Iterator[Token]):
    """
    Lazy token stream over a source string.

    The cursor always rests on a non-whitespace character, or is None once
    the input is exhausted. An exhausted tokenizer stays exhausted.
    """

    def __init__(self, source: str, policy: IntegerPolicy | None = None) -> None:
        self.source = source
        self.policy = policy or DEFAULT_POLICY
        self._idx: int | None = self._next_significant(0)

    def _next_significant(self, start: int) -> int | None:
        """Index of the first non-whitespace character at or after ``start``."""
        i = start
        n = len(self.source)
        while i < n:
            if not self.source[i].isspace():
                return i
            i += 1
        return None

    def __next__(self) -> Token:
        if self._idx is None:
            raise StopIteration

        start = self._idx
        c = self.source[start]

        if c in _SINGLE_MAP:
            token = Token(_SINGLE_MAP[c], pos=start)
            end = start + 1
        elif c in _DIGITS:
            accum = 0
            end = start
            while end < len(self.source) and self.source[end] in _DIGITS:
                accum = accum * 10 + _DIGITS.index(self.source[end])
                end += 1
            value = self.policy.fit(accum)
            text = self.source[start:end] if value != accum else None
            token = Token(TokenKind.INT, value, start, text)
        else:
            raise InvalidCharacter(start, c)

        self._idx = self._next_significant(end)
        logger.debug("Produced %r", token)
        return token


def tokenize(source: str, policy: IntegerPolicy | None = None) -> Tokenizer:
    """Return a lazy token stream for an expression string."""
    return Tokenizer(source, policy)
