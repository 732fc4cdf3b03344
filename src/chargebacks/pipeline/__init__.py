"""Pipeline de normalização (registry → avaliador → validador)."""

from chargebacks.pipeline.orchestrator import ChargebackPipeline
from chargebacks.pipeline.outcomes import (
    ErrorKind,
    Failed,
    PipelineOutcome,
    Rejected,
    Succeeded,
)

__all__ = [
    "ChargebackPipeline",
    "ErrorKind",
    "Failed",
    "PipelineOutcome",
    "Rejected",
    "Succeeded",
]
