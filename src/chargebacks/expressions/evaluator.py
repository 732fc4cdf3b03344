"""Avaliador de expressões compiladas.

Cada chamada a evaluate() usa um contexto próprio (prazo e payload),
sem estado compartilhado entre chamadas. O prazo é verificado de forma
cooperativa a cada nó visitado.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from chargebacks.document import ABSENT, detach, resolve_path
from chargebacks.expressions.nodes import (
    CallNode,
    CoalesceNode,
    CompiledExpression,
    ExpressionNode,
    LiteralNode,
    ObjectNode,
    PathNode,
)
from chargebacks.expressions.operators import OPERATORS
from utils.errors import EvaluationError, EvaluationTimeoutError

DEFAULT_TIMEOUT_SECONDS = 1.0


@dataclass(slots=True)
class _EvaluationContext:
    """Estado de uma única avaliação (nunca reutilizado)."""

    payload: Any
    deadline: float
    clock: Callable[[], float]

    def check_deadline(self) -> None:
        if self.clock() > self.deadline:
            raise EvaluationTimeoutError("avaliação excedeu o prazo")


class ExpressionEvaluator:
    """Executa CompiledExpression contra payloads.

    Args:
        timeout_seconds: Prazo máximo por avaliação
        clock: Relógio monotônico (injetável para testes)
    """

    __slots__ = ("_clock", "_timeout_seconds")

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds deve ser positivo")
        self._timeout_seconds = timeout_seconds
        self._clock = clock

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def evaluate(self, expression: CompiledExpression, payload: Any) -> dict[str, Any]:
        """Avalia a expressão e retorna o documento candidato.

        Raises:
            EvaluationTimeoutError: Se o prazo for excedido
            EvaluationError: Se um operador receber tipo inválido
        """
        context = _EvaluationContext(
            payload=payload,
            deadline=self._clock() + self._timeout_seconds,
            clock=self._clock,
        )
        return self._evaluate_object(expression.root, context)

    def _evaluate_node(self, node: ExpressionNode, context: _EvaluationContext) -> Any:
        context.check_deadline()

        if isinstance(node, LiteralNode):
            return node.value

        if isinstance(node, PathNode):
            return detach(resolve_path(context.payload, node.segments))

        if isinstance(node, CoalesceNode):
            for option in node.options:
                value = self._evaluate_node(option, context)
                if value is not ABSENT:
                    return value
            return ABSENT

        if isinstance(node, CallNode):
            args = [self._evaluate_node(arg, context) for arg in node.args]
            return OPERATORS[node.operator].func(*args)

        if isinstance(node, ObjectNode):
            return self._evaluate_object(node, context)

        raise EvaluationError(f"nó desconhecido: {type(node).__name__}")

    def _evaluate_object(self, node: ObjectNode, context: _EvaluationContext) -> dict[str, Any]:
        context.check_deadline()
        result: dict[str, Any] = {}
        for key, child in node.fields:
            value = self._evaluate_node(child, context)
            if value is not ABSENT:
                result[key] = value
        return result
