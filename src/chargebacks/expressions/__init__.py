"""Linguagem declarativa de mapeamento por provider.

Uso:
    from chargebacks.expressions import ExpressionEvaluator, compile_source

    expression = compile_source(path.read_text(), name="stripe")
    evaluator = ExpressionEvaluator(timeout_seconds=1.0)
    candidate = evaluator.evaluate(expression, payload)
"""

from chargebacks.expressions.compiler import (
    MAX_EXPRESSION_DEPTH,
    compile_expression,
    compile_source,
)
from chargebacks.expressions.evaluator import DEFAULT_TIMEOUT_SECONDS, ExpressionEvaluator
from chargebacks.expressions.nodes import CompiledExpression
from chargebacks.expressions.operators import OPERATORS, STRUCTURAL_FORMS

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "MAX_EXPRESSION_DEPTH",
    "OPERATORS",
    "STRUCTURAL_FORMS",
    "CompiledExpression",
    "ExpressionEvaluator",
    "compile_expression",
    "compile_source",
]
