"""Compilação de expressões de mapeamento (YAML → árvore imutável).

Formato da fonte:

    transaction_id: {path: data.object.charge}
    currency: {upper: {path: data.object.currency}}
    amount: {divide: [{path: data.object.amount}, 100]}
    provider: stripe

A raiz é sempre um mapeamento campo → expressão. Escalares soltos são
literais; mapeamentos de uma única chave são operadores da allow-list.
Qualquer construção fora da allow-list é rejeitada com CompileError.
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from chargebacks.document import parse_path
from chargebacks.expressions.nodes import (
    CallNode,
    CoalesceNode,
    CompiledExpression,
    ExpressionNode,
    LiteralNode,
    ObjectNode,
    PathNode,
)
from chargebacks.expressions.operators import OPERATORS, is_allowed
from utils.errors import CompileError

logger = logging.getLogger(__name__)

# Profundidade máxima de aninhamento aceita
MAX_EXPRESSION_DEPTH = 32

_SCALAR_TYPES = (str, int, float, bool)


def compile_source(source_text: str, name: str = "") -> CompiledExpression:
    """Faz parse do texto YAML e compila a expressão.

    Args:
        source_text: Conteúdo do arquivo de mapeamento
        name: Identificador para mensagens de erro (ex: "stripe")

    Raises:
        CompileError: Se o YAML for inválido ou a expressão não suportada
    """
    try:
        source = yaml.safe_load(source_text)
    except yaml.YAMLError as exc:
        raise CompileError(f"YAML inválido: {exc}", name) from exc
    return compile_expression(source, name)


def compile_expression(source: Any, name: str = "") -> CompiledExpression:
    """Compila uma expressão já desserializada.

    Raises:
        CompileError: Se a raiz não for mapeamento ou houver construção inválida
    """
    if not isinstance(source, dict):
        raise CompileError("a raiz do mapeamento deve ser um objeto", name)

    expression = CompiledExpression(
        name=name,
        root=_compile_object(source, name, depth=1, location=""),
    )
    logger.debug(
        "expression_compiled",
        extra={"expression": name, "fields": list(expression.output_fields)},
    )
    return expression


def _compile_object(
    fields: dict[Any, Any],
    name: str,
    depth: int,
    location: str,
) -> ObjectNode:
    compiled: list[tuple[str, ExpressionNode]] = []
    for key, value in fields.items():
        if not isinstance(key, str) or not key:
            raise CompileError(f"chave de objeto inválida em '{location or '/'}': {key!r}", name)
        compiled.append((key, _compile_node(value, name, depth + 1, f"{location}/{key}")))
    return ObjectNode(fields=tuple(compiled))


def _compile_node(source: Any, name: str, depth: int, location: str) -> ExpressionNode:
    if depth > MAX_EXPRESSION_DEPTH:
        raise CompileError(
            f"aninhamento excede {MAX_EXPRESSION_DEPTH} níveis em '{location}'", name
        )

    if source is None or isinstance(source, _SCALAR_TYPES):
        return LiteralNode(value=source)

    if not isinstance(source, dict):
        raise CompileError(
            f"construção não suportada em '{location}': {type(source).__name__}", name
        )

    if len(source) != 1:
        raise CompileError(
            f"operador deve ter exatamente uma chave em '{location}'", name
        )

    ((operator, operand),) = source.items()
    if not isinstance(operator, str) or not is_allowed(operator):
        raise CompileError(f"operador não suportado em '{location}': {operator!r}", name)

    if operator == "literal":
        if operand is not None and not isinstance(operand, _SCALAR_TYPES):
            raise CompileError(f"literal deve ser escalar em '{location}'", name)
        return LiteralNode(value=operand)

    if operator == "path":
        try:
            segments = parse_path(operand)
        except ValueError as exc:
            raise CompileError(f"path inválido em '{location}': {exc}", name) from exc
        return PathNode(path=operand, segments=segments)

    if operator == "object":
        if not isinstance(operand, dict):
            raise CompileError(f"object espera um mapeamento em '{location}'", name)
        return _compile_object(operand, name, depth, location)

    args = _compile_args(operator, operand, name, depth, location)

    if operator == "coalesce":
        if not args:
            raise CompileError(f"coalesce exige ao menos um operando em '{location}'", name)
        return CoalesceNode(options=args)

    operator_spec = OPERATORS[operator]
    if len(args) != operator_spec.arity:
        raise CompileError(
            f"{operator} espera {operator_spec.arity} operando(s), recebeu {len(args)} em '{location}'",
            name,
        )
    return CallNode(operator=operator, args=args)


def _compile_args(
    operator: str,
    operand: Any,
    name: str,
    depth: int,
    location: str,
) -> tuple[ExpressionNode, ...]:
    # Operadores unários aceitam o operando direto; os demais, uma lista
    raw_args = operand if isinstance(operand, list) else [operand]
    return tuple(
        _compile_node(arg, name, depth + 1, f"{location}/{operator}[{index}]")
        for index, arg in enumerate(raw_args)
    )
