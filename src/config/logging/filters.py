"""Filters de logging para contexto e proteção de payloads.

Campos injetados:
- correlation_id: ID de rastreamento da requisição de webhook
- service: Nome do serviço

Campos protegidos:
- payload/raw_payload/record: substituídos por marcador, a menos que
  LOG_PAYLOADS esteja habilitado (apenas depuração local)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

# Atributos de `extra` que podem carregar dados do portador do cartão
SENSITIVE_RECORD_FIELDS = frozenset({"payload", "raw_payload", "record", "candidate"})

REDACTED_MARKER = "[redacted]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class PayloadRedactionFilter(logging.Filter):
    """Mascara atributos sensíveis passados via `extra`.

    Args:
        enabled: Se False, os atributos passam sem alteração.
        fields: Nomes de atributos a mascarar.
    """

    def __init__(
        self,
        enabled: bool = True,
        fields: Iterable[str] = SENSITIVE_RECORD_FIELDS,
    ) -> None:
        super().__init__()
        self._enabled = enabled
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._enabled:
            return True
        for name in self._fields:
            if name in record.__dict__:
                setattr(record, name, REDACTED_MARKER)
        return True
