"""Settings do pipeline de normalização.

Controlam de onde os mapeamentos são carregados, o prazo de avaliação
das expressões e a escolha de provider quando o webhook não informa.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from chargebacks.registry import DEFAULT_MAPPINGS_DIR, is_valid_provider_key

# Limite superior para o prazo de avaliação (segundos)
MAX_EVALUATION_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class PipelineSettings:
    """Configurações do pipeline.

    Attributes:
        mappings_dir: Diretório com um arquivo `<provider>.yaml` por provider
        evaluation_timeout_seconds: Prazo máximo por avaliação de expressão
        default_provider: Provider usado quando o webhook não informa nem é detectado
        provider_detection_enabled: Detecta o provider pelo formato do payload
    """

    mappings_dir: Path = DEFAULT_MAPPINGS_DIR
    evaluation_timeout_seconds: float = 1.0
    default_provider: str = "stripe"
    provider_detection_enabled: bool = True

    def validate(self) -> list[str]:
        """Valida configurações do pipeline.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.mappings_dir.is_dir():
            errors.append(f"MAPPINGS_DIR não encontrado: {self.mappings_dir}")

        if not 0 < self.evaluation_timeout_seconds <= MAX_EVALUATION_TIMEOUT_SECONDS:
            errors.append(
                "EVALUATION_TIMEOUT_SECONDS deve estar entre 0 e "
                f"{MAX_EVALUATION_TIMEOUT_SECONDS}: {self.evaluation_timeout_seconds}"
            )

        if self.default_provider and not is_valid_provider_key(self.default_provider):
            errors.append(f"DEFAULT_PROVIDER inválido: {self.default_provider}")

        return errors


def _parse_timeout(value: str | None) -> float:
    if not value:
        return PipelineSettings.evaluation_timeout_seconds
    try:
        return float(value)
    except ValueError:
        # Valor inválido é reportado por validate()
        return 0.0


def _load_pipeline_from_env() -> PipelineSettings:
    """Carrega PipelineSettings de variáveis de ambiente."""
    mappings_dir = os.getenv("MAPPINGS_DIR", "")
    return PipelineSettings(
        mappings_dir=Path(mappings_dir) if mappings_dir else DEFAULT_MAPPINGS_DIR,
        evaluation_timeout_seconds=_parse_timeout(os.getenv("EVALUATION_TIMEOUT_SECONDS")),
        default_provider=os.getenv("DEFAULT_PROVIDER", "stripe").strip(),
        provider_detection_enabled=os.getenv(
            "PROVIDER_DETECTION_ENABLED", "true"
        ).lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_pipeline_settings() -> PipelineSettings:
    """Retorna instância cacheada de PipelineSettings."""
    return _load_pipeline_from_env()
