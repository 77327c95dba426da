"""Core calcrepr functionality: IR, expression language, errors, configuration."""

from . import ir
from .config import CalcConfig, IntegerPolicy, OverflowMode, load_config
from .errors import (
    CalcError,
    ConfigError,
    DivisionByZero,
    EvaluationError,
    ExpressionTooDeep,
    IntegerOverflow,
    InvalidCharacter,
    ParseError,
    TokenizeError,
    TrailingInput,
    UnbalancedParenthesis,
    UnexpectedEndOfInput,
    UnexpectedToken,
)

__all__ = [
    "ir",
    "CalcConfig",
    "IntegerPolicy",
    "OverflowMode",
    "load_config",
    "CalcError",
    "ConfigError",
    "DivisionByZero",
    "EvaluationError",
    "ExpressionTooDeep",
    "IntegerOverflow",
    "InvalidCharacter",
    "ParseError",
    "TokenizeError",
    "TrailingInput",
    "UnbalancedParenthesis",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
]
