"""Testes das settings carregadas de variáveis de ambiente."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from chargebacks.registry import DEFAULT_MAPPINGS_DIR
from config.settings import (
    BaseSettings,
    PipelineSettings,
    get_base_settings,
    get_pipeline_settings,
)

_ENV_VARS = (
    "ENVIRONMENT",
    "SERVICE_NAME",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_PAYLOADS",
    "MAPPINGS_DIR",
    "EVALUATION_TIMEOUT_SECONDS",
    "DEFAULT_PROVIDER",
    "PROVIDER_DETECTION_ENABLED",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_base_settings.cache_clear()
    get_pipeline_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_pipeline_settings.cache_clear()


class TestBaseSettings:
    def test_defaults(self) -> None:
        settings = get_base_settings()
        assert settings == BaseSettings()
        assert settings.is_development
        assert not settings.is_strict
        assert settings.validate() == []

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SERVICE_NAME", "chargebacks-test")

        settings = get_base_settings()

        assert settings.environment == "production"
        assert settings.is_production
        assert settings.is_strict
        assert settings.log_level == "DEBUG"
        assert settings.service_name == "chargebacks-test"

    def test_settings_are_cached(self) -> None:
        assert get_base_settings() is get_base_settings()

    def test_invalid_values_are_reported(self) -> None:
        settings = BaseSettings(service_name="", log_level="VERBOSE")
        errors = settings.validate()
        assert any("SERVICE_NAME" in error for error in errors)
        assert any("LOG_LEVEL" in error for error in errors)

    def test_payload_logging_forbidden_in_production(self) -> None:
        settings = BaseSettings(environment="production", log_payloads=True)
        assert any("LOG_PAYLOADS" in error for error in settings.validate())


class TestPipelineSettings:
    def test_defaults(self) -> None:
        settings = get_pipeline_settings()
        assert settings.mappings_dir == DEFAULT_MAPPINGS_DIR
        assert settings.evaluation_timeout_seconds == 1.0
        assert settings.default_provider == "stripe"
        assert settings.provider_detection_enabled
        assert settings.validate() == []

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("MAPPINGS_DIR", str(tmp_path))
        monkeypatch.setenv("EVALUATION_TIMEOUT_SECONDS", "0.25")
        monkeypatch.setenv("DEFAULT_PROVIDER", "adyen")
        monkeypatch.setenv("PROVIDER_DETECTION_ENABLED", "false")

        settings = get_pipeline_settings()

        assert settings.mappings_dir == tmp_path
        assert settings.evaluation_timeout_seconds == 0.25
        assert settings.default_provider == "adyen"
        assert not settings.provider_detection_enabled

    def test_unparseable_timeout_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVALUATION_TIMEOUT_SECONDS", "um segundo")
        errors = get_pipeline_settings().validate()
        assert any("EVALUATION_TIMEOUT_SECONDS" in error for error in errors)

    @pytest.mark.parametrize("timeout", [0.0, -1.0, 31.0])
    def test_out_of_range_timeout(self, timeout: float) -> None:
        errors = PipelineSettings(evaluation_timeout_seconds=timeout).validate()
        assert any("EVALUATION_TIMEOUT_SECONDS" in error for error in errors)

    def test_missing_directory_and_bad_provider(self, tmp_path: Path) -> None:
        settings = PipelineSettings(mappings_dir=tmp_path / "nada", default_provider="Stripe")
        errors = settings.validate()
        assert any("MAPPINGS_DIR" in error for error in errors)
        assert any("DEFAULT_PROVIDER" in error for error in errors)
