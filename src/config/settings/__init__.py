"""Agregador de settings do serviço.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.pipeline import (
    MAX_EVALUATION_TIMEOUT_SECONDS,
    PipelineSettings,
    get_pipeline_settings,
)

__all__ = [
    "MAX_EVALUATION_TIMEOUT_SECONDS",
    "VALID_LOG_LEVELS",
    "BaseSettings",
    "Environment",
    "PipelineSettings",
    "get_base_settings",
    "get_pipeline_settings",
]
