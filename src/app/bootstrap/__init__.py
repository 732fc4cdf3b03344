"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e constrói o pipeline com suas dependências concretas.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings, build_pipeline

    initialize_app()
    validate_runtime_settings()
    pipeline = build_pipeline()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.dependencies import create_pipeline
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_pipeline_settings

if TYPE_CHECKING:
    from chargebacks.pipeline import ChargebackPipeline
    from config.settings import PipelineSettings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
        log_payloads=settings.log_payloads,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Se houver erros em ambiente estrito
    """
    base_settings = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base_settings.validate())
    errors.extend(f"pipeline: {error}" for error in get_pipeline_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base_settings.environment,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base_settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base_settings.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base_settings.environment}:\n{details}")


def build_pipeline(settings: PipelineSettings | None = None) -> ChargebackPipeline:
    """Constrói o pipeline a partir das settings (ou das settings de ambiente)."""
    return create_pipeline(settings or get_pipeline_settings())

