"""
calcrepr arithmetic expression language.

Tokenizer, parser, evaluator, and renderer for integer arithmetic with
+, -, *, /, parentheses, and unary minus on literals.

Usage:
    from calcrepr.core.expression_lang import evaluate

    result = evaluate("(-12 + 34) * ((56 / 7) + 8)")
    # result.value == 352
    # result.rendered == "<(<<-12>+34>)*(<(<56/7>)+8>)>"
"""

from calcrepr.core.expression_lang.api import Evaluation, evaluate
from calcrepr.core.expression_lang.evaluator import compute
from calcrepr.core.expression_lang.parser import parse_expr
from calcrepr.core.expression_lang.renderer import render
from calcrepr.core.expression_lang.tokenizer import tokenize

__all__ = ["Evaluation", "compute", "evaluate", "parse_expr", "render", "tokenize"]
