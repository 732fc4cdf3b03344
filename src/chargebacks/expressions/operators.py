"""Allow-list de operadores da linguagem de mapeamento.

Somente os operadores declarados em OPERATORS podem aparecer em uma
expressão. Cada operador é uma função pura sobre valores já avaliados.

Regras de propagação:
- ABSENT e None passam adiante sem erro (a validação decide depois)
- Valor presente com tipo errado levanta EvaluationError
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from chargebacks.document import ABSENT, json_type_name
from utils.errors import EvaluationError


@dataclass(frozen=True, slots=True)
class OperatorSpec:
    """Definição de um operador permitido.

    Attributes:
        name: Nome usado no YAML (ex: "upper")
        arity: Quantidade exata de operandos
        func: Implementação pura
    """

    name: str
    arity: int
    func: Callable[..., Any]


def _is_passthrough(value: Any) -> bool:
    return value is ABSENT or value is None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_string(op: str, value: Any) -> str:
    if not isinstance(value, str):
        raise EvaluationError(f"{op} espera string, recebeu {json_type_name(value)}")
    return value


def _require_number(op: str, value: Any) -> int | float:
    if not _is_number(value):
        raise EvaluationError(f"{op} espera number, recebeu {json_type_name(value)}")
    return value


def _finite(op: str, value: int | float) -> int | float:
    if isinstance(value, float) and not math.isfinite(value):
        raise EvaluationError(f"{op} produziu valor não finito")
    return value


def _upper(value: Any) -> Any:
    if _is_passthrough(value):
        return value
    return _require_string("upper", value).upper()


def _lower(value: Any) -> Any:
    if _is_passthrough(value):
        return value
    return _require_string("lower", value).lower()


def _number(value: Any) -> Any:
    if _is_passthrough(value):
        return value
    if _is_number(value):
        return _finite("number", value)
    text = _require_string("number", value).strip()
    try:
        parsed: int | float = int(text)
    except ValueError:
        try:
            parsed = float(text)
        except ValueError as exc:
            raise EvaluationError("number recebeu string não numérica") from exc
    return _finite("number", parsed)


def _string(value: Any) -> Any:
    if _is_passthrough(value):
        return value
    if isinstance(value, str):
        return value
    number = _require_number("string", value)
    try:
        return str(number)
    except ValueError as exc:
        # int acima do limite de dígitos do interpretador
        raise EvaluationError("string recebeu número grande demais") from exc


def _arithmetic(
    name: str,
    compute: Callable[[int | float, int | float], int | float],
) -> Callable[[Any, Any], Any]:
    def apply(left: Any, right: Any) -> Any:
        if _is_passthrough(left):
            return left
        if _is_passthrough(right):
            return right
        left_number = _require_number(name, left)
        right_number = _require_number(name, right)
        try:
            result = compute(left_number, right_number)
        except OverflowError as exc:
            raise EvaluationError(f"{name} produziu valor não finito") from exc
        return _finite(name, result)

    return apply


def _divide(left: int | float, right: int | float) -> float:
    if right == 0:
        raise EvaluationError("divide por zero")
    return left / right


OPERATORS: dict[str, OperatorSpec] = {
    definition.name: definition
    for definition in (
        OperatorSpec("upper", 1, _upper),
        OperatorSpec("lower", 1, _lower),
        OperatorSpec("number", 1, _number),
        OperatorSpec("string", 1, _string),
        OperatorSpec("add", 2, _arithmetic("add", lambda a, b: a + b)),
        OperatorSpec("subtract", 2, _arithmetic("subtract", lambda a, b: a - b)),
        OperatorSpec("multiply", 2, _arithmetic("multiply", lambda a, b: a * b)),
        OperatorSpec("divide", 2, _arithmetic("divide", _divide)),
    )
}

# Formas estruturais tratadas diretamente pelo compilador
STRUCTURAL_FORMS = frozenset({"path", "literal", "object", "coalesce"})


def is_allowed(name: str) -> bool:
    """Retorna True se o nome é um operador ou forma estrutural permitida."""
    return name in OPERATORS or name in STRUCTURAL_FORMS
