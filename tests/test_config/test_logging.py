"""Testes abrangentes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
PayloadRedactionFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REDACTED_MARKER,
    REQUIRED_LOG_FIELDS,
    SENSITIVE_RECORD_FIELDS,
    CorrelationIdFilter,
    PayloadRedactionFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        """Nível é case insensitive."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_filters(self) -> None:
        """Handler recebe filtro de correlation_id e de payload."""
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, PayloadRedactionFilter) for f in filters)

    def test_valid_log_levels_constant(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_default_service_name_constant(self) -> None:
        assert DEFAULT_SERVICE_NAME == "chargeback-mapper"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        """Filter adiciona correlation_id do getter."""
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """Filter preserva correlation_id passado via extra."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name", None)
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""


class TestPayloadRedactionFilter:
    """Testes para PayloadRedactionFilter."""

    def test_sensitive_fields_are_masked(self) -> None:
        record = _record()
        record.payload = {"card": "4111111111111111"}
        record.provider = "stripe"
        assert PayloadRedactionFilter().filter(record) is True
        assert record.payload == REDACTED_MARKER
        assert record.provider == "stripe"

    def test_disabled_filter_keeps_fields(self) -> None:
        record = _record()
        record.record = {"amount": 1}
        PayloadRedactionFilter(enabled=False).filter(record)
        assert record.record == {"amount": 1}

    def test_absent_fields_are_not_added(self) -> None:
        record = _record()
        PayloadRedactionFilter().filter(record)
        assert not any(name in record.__dict__ for name in SENSITIVE_RECORD_FIELDS)


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert expected == set(REQUIRED_LOG_FIELDS)

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_create_json_formatter_returns_formatter(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(create_json_formatter(), JsonFormatter)

    def test_json_formatter_formats_record(self) -> None:
        """JsonFormatter emite JSON com campos renomeados."""
        record = _record("chargeback_succeeded")
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.provider = "stripe"

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "chargeback_succeeded"
        assert output["level"] == "INFO"
        assert output["logger"] == "test"
        assert output["correlation_id"] == "abc-123"
        assert output["provider"] == "stripe"


class TestLoggingIntegration:
    """Testes de integração do sistema de logging."""

    def test_full_logging_flow(self) -> None:
        """Fluxo completo: configure, get_logger, log."""
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        logger = get_logger("integration.test")
        logger.debug("debug_message", extra={"custom_field": "value"})
        logger.info("info_message", extra={"payload": {"secret": "x"}})
        logger.warning("warning_message")
