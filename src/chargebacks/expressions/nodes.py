"""Árvore compilada de uma expressão de mapeamento.

Todos os nós são imutáveis; uma CompiledExpression pode ser
compartilhada entre avaliações concorrentes sem sincronização.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chargebacks.document import PathSegment


@dataclass(frozen=True, slots=True)
class LiteralNode:
    """Valor escalar constante."""

    value: Any


@dataclass(frozen=True, slots=True)
class PathNode:
    """Acesso a campo do payload."""

    path: str
    segments: tuple[PathSegment, ...]


@dataclass(frozen=True, slots=True)
class CoalesceNode:
    """Primeiro operando presente (não ABSENT)."""

    options: tuple[ExpressionNode, ...]


@dataclass(frozen=True, slots=True)
class CallNode:
    """Aplicação de um operador da allow-list."""

    operator: str
    args: tuple[ExpressionNode, ...]


@dataclass(frozen=True, slots=True)
class ObjectNode:
    """Construção de objeto; campos ABSENT são omitidos."""

    fields: tuple[tuple[str, ExpressionNode], ...]


ExpressionNode = LiteralNode | PathNode | CoalesceNode | CallNode | ObjectNode


@dataclass(frozen=True, slots=True)
class CompiledExpression:
    """Expressão pronta para avaliação.

    Attributes:
        name: Identificador da origem (normalmente a chave do provider)
        root: Objeto raiz que produz o documento de saída
    """

    name: str
    root: ObjectNode

    @property
    def output_fields(self) -> tuple[str, ...]:
        """Campos de primeiro nível produzidos pela expressão."""
        return tuple(key for key, _ in self.root.fields)
