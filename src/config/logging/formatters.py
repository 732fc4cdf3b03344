"""Formatters de logging estruturado.

Campos obrigatórios em todo log:
- asctime, level, logger, message
- correlation_id, service
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável dos campos no JSON de saída
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter(timestamp_format: str = "%Y-%m-%dT%H:%M:%S%z") -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Args:
        timestamp_format: Formato de `asctime` (padrão ISO 8601 com offset)

    Exemplo de output:
        {
            "asctime": "2026-10-19T10:30:00+0000",
            "level": "INFO",
            "logger": "chargebacks.pipeline.orchestrator",
            "message": "chargeback_succeeded",
            "correlation_id": "abc-123",
            "service": "chargeback-mapper",
            "provider": "stripe"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        datefmt=timestamp_format,
        rename_fields=FIELD_RENAME_MAP,
    )
