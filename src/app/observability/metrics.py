"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Desfecho: contador de execuções do pipeline por provider e estado final

Uso:
    from app.observability.metrics import record_latency, record_outcome

    start = time.perf_counter()
    # ... operação ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("pipeline", "process", latency_ms, correlation_id)

    record_outcome("stripe", "SUCCEEDED", correlation_id=correlation_id)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "pipeline", "webhook")
        operation: Nome da operação (ex: "process")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_outcome(
    provider: str,
    state: str,
    error_kind: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra desfecho de uma execução do pipeline.

    Args:
        provider: Chave do provider solicitado
        state: Estado terminal (SUCCEEDED, REJECTED, FAILED)
        error_kind: Categoria da falha (apenas para FAILED)
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, str | None] = {
        "metric_type": "outcome",
        "component": "pipeline",
        "provider": provider,
        "state": state,
        "correlation_id": correlation_id,
    }
    if error_kind:
        extra["error_kind"] = error_kind

    logger.info(
        "metric_outcome",
        extra=extra,
    )
