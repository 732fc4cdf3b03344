"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="chargeback-mapper")
    logger = get_logger(__name__)
    logger.info("provider_registry_loaded", extra={"provider_count": 3})

Campos obrigatórios em todo log: correlation_id, service, level,
logger, message, asctime. Sem payloads brutos.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import (
    REDACTED_MARKER,
    SENSITIVE_RECORD_FIELDS,
    CorrelationIdFilter,
    PayloadRedactionFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED_MARKER",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_RECORD_FIELDS",
    "CorrelationIdFilter",
    "PayloadRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
