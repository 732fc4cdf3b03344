"""Navegação segura em documentos JSON sem schema fixo.

Payloads de provider chegam como árvores arbitrárias de dict/list/str/
número/bool/None. Os helpers daqui nunca levantam exceção por chave
ausente ou tipo inesperado: devolvem o marcador ABSENT.
"""

from __future__ import annotations

import copy
import re
from typing import Any

# Segmento de path: chave (str) ou índice de lista (int)
PathSegment = str | int

_KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_\-]*")
_INDEX_PATTERN = re.compile(r"\[(\d+)\]")


class _Absent:
    """Marcador de valor ausente (equivalente ao `undefined` de JSON)."""

    __slots__ = ()
    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> _Absent:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Absent:
        return self


ABSENT: Any = _Absent()


def is_absent(value: Any) -> bool:
    """Retorna True se o valor é o marcador ABSENT."""
    return value is ABSENT


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Converte path textual em segmentos.

    Formato: chaves separadas por ponto, com índices opcionais entre
    colchetes (ex: ``data.object.charge``, ``items[0].id``).

    Raises:
        ValueError: Se o path estiver vazio ou malformado.
    """
    if not isinstance(path, str) or not path.strip():
        raise ValueError("path vazio")

    segments: list[PathSegment] = []
    for part in path.split("."):
        key_match = _KEY_PATTERN.match(part)
        if key_match is None:
            raise ValueError(f"segmento inválido no path: {part!r}")
        segments.append(key_match.group(0))

        rest = part[key_match.end():]
        while rest:
            index_match = _INDEX_PATTERN.match(rest)
            if index_match is None:
                raise ValueError(f"índice inválido no path: {part!r}")
            segments.append(int(index_match.group(1)))
            rest = rest[index_match.end():]

    return tuple(segments)


def resolve_path(document: Any, segments: tuple[PathSegment, ...]) -> Any:
    """Navega no documento seguindo os segmentos.

    Args:
        document: Documento JSON de entrada (não é modificado).
        segments: Segmentos produzidos por parse_path.

    Returns:
        Valor encontrado ou ABSENT se qualquer passo não existir
        ou tiver tipo incompatível.
    """
    current = document
    for segment in segments:
        if isinstance(segment, int):
            if not isinstance(current, list) or segment >= len(current):
                return ABSENT
            current = current[segment]
        else:
            if not isinstance(current, dict) or segment not in current:
                return ABSENT
            current = current[segment]
    return current


def detach(value: Any) -> Any:
    """Retorna cópia independente de containers (dict/list).

    Escalares são imutáveis e retornados como estão.
    """
    if isinstance(value, (dict, list)):
        return copy.deepcopy(value)
    return value


def json_type_name(value: Any) -> str:
    """Nome do tipo JSON lógico de um valor Python."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
