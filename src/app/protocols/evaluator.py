"""Protocolo do avaliador de expressões de mapeamento."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from chargebacks.expressions import CompiledExpression


class ExpressionEvaluatorProtocol(Protocol):
    """Contrato mínimo: avaliação pura de uma expressão compilada."""

    def evaluate(self, expression: CompiledExpression, payload: Any) -> Any: ...
