"""
calcrepr - integer arithmetic evaluator with canonical rendering.

Reads an arithmetic expression and returns both its value and a fully
bracketed rendering that makes operator precedence explicit.
"""

from __future__ import annotations

from ._version import get_version
from .core.config import IntegerPolicy, OverflowMode
from .core.errors import CalcError, EvaluationError, ParseError, TokenizeError
from .core.expression_lang import Evaluation, evaluate

__version__ = get_version()

__all__ = [
    "__version__",
    "CalcError",
    "Evaluation",
    "EvaluationError",
    "IntegerPolicy",
    "OverflowMode",
    "ParseError",
    "TokenizeError",
    "evaluate",
]
