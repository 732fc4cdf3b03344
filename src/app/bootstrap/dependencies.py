"""Factories do pipeline — criação das implementações concretas.

Este módulo centraliza a construção de registry, avaliador e validador
a partir das settings. Tudo é construído uma única vez, no startup,
antes de o serviço aceitar tráfego.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chargebacks.expressions import ExpressionEvaluator
from chargebacks.pipeline import ChargebackPipeline
from chargebacks.registry import load_registry
from chargebacks.validation import SchemaValidator

if TYPE_CHECKING:
    from chargebacks.registry import ProviderRegistry
    from config.settings import PipelineSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Componentes
# ──────────────────────────────────────────────────────────────────────────────


def create_provider_registry(settings: PipelineSettings) -> ProviderRegistry:
    """Carrega e congela o registry a partir de MAPPINGS_DIR.

    Raises:
        MappingConfigError: Se algum mapeamento não puder ser carregado
    """
    return load_registry(settings.mappings_dir)


def create_expression_evaluator(settings: PipelineSettings) -> ExpressionEvaluator:
    """Cria avaliador com o prazo configurado."""
    return ExpressionEvaluator(timeout_seconds=settings.evaluation_timeout_seconds)


def create_schema_validator() -> SchemaValidator:
    """Cria validador do registro normalizado."""
    return SchemaValidator()


# ──────────────────────────────────────────────────────────────────────────────
# Pipeline
# ──────────────────────────────────────────────────────────────────────────────


def create_pipeline(settings: PipelineSettings) -> ChargebackPipeline:
    """Monta o pipeline completo.

    Qualquer falha aqui é fatal: o processo não deve servir tráfego
    com um registry parcial.

    Returns:
        ChargebackPipeline pronto para uso concorrente
    """
    pipeline = ChargebackPipeline(
        registry=create_provider_registry(settings),
        evaluator=create_expression_evaluator(settings),
        validator=create_schema_validator(),
    )
    logger.info(
        "pipeline_ready",
        extra={
            "component": "bootstrap",
            "providers": list(pipeline.registry.keys()),
            "evaluation_timeout_seconds": settings.evaluation_timeout_seconds,
        },
    )
    return pipeline
