"""Correlation_id por requisição de webhook.

O valor vem do header `x-correlation-id` (quando o provider ou um proxy
o envia) ou é gerado. É injetado nos logs pelo CorrelationIdFilter e
devolvido no header da resposta.

Uso:
    token = set_correlation_id(correlation_id_from_header(request.headers.get(HEADER)))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "x-correlation-id"

# Valores externos aceitos como correlation_id (evita injeção em logs)
_MAX_CORRELATION_ID_LENGTH = 128
_CORRELATION_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:\-]+$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None ou vazio, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def correlation_id_from_header(value: str | None) -> str | None:
    """Aceita o valor do header apenas se for curto e sem caracteres especiais.

    Returns:
        O valor recebido, ou None para que um novo ID seja gerado.
    """
    if not value:
        return None
    value = value.strip()
    if len(value) > _MAX_CORRELATION_ID_LENGTH:
        return None
    if not _CORRELATION_ID_PATTERN.match(value):
        return None
    return value
