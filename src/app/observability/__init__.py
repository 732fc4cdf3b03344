"""Observabilidade — logs estruturados e métricas.

Re-exporta funções de correlation_id e métricas para uso em toda a aplicação.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_outcome
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    correlation_id_from_header,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_outcome

__all__ = [
    "CORRELATION_ID_HEADER",
    "correlation_id_from_header",
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_outcome",
    "reset_correlation_id",
    "set_correlation_id",
]
