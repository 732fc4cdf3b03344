"""Desfechos tipados de uma execução do pipeline.

O transporte recebe sempre um destes três valores; nenhuma exceção
escapa do pipeline sem categoria.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from chargebacks.validation import Violation
from fsm import PipelineState


class ErrorKind(StrEnum):
    """Categoria de falha de execução (desfecho Failed)."""

    UNKNOWN_PROVIDER = "unknown_provider"
    TIMEOUT = "timeout"
    EVALUATION_ERROR = "evaluation_error"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True, slots=True)
class Succeeded:
    """Registro normalizado válido."""

    record: dict[str, Any] = field(default_factory=dict)

    @property
    def state(self) -> PipelineState:
        return PipelineState.SUCCEEDED


@dataclass(frozen=True, slots=True)
class Rejected:
    """Execução completa, registro fora do schema."""

    violations: tuple[Violation, ...] = ()

    @property
    def state(self) -> PipelineState:
        return PipelineState.REJECTED


@dataclass(frozen=True, slots=True)
class Failed:
    """Execução interrompida antes de produzir um registro."""

    kind: ErrorKind
    message: str

    @property
    def state(self) -> PipelineState:
        return PipelineState.FAILED


PipelineOutcome = Succeeded | Rejected | Failed

# Mensagens estáveis devolvidas ao chamador (detalhes ficam só nos logs)
UNKNOWN_PROVIDER_MESSAGE = "Unknown provider: {provider_key}"
TIMEOUT_MESSAGE = "Mapping evaluation timed out"
EVALUATION_ERROR_MESSAGE = "Mapping evaluation failed"
INTERNAL_ERROR_MESSAGE = "Internal pipeline error"
