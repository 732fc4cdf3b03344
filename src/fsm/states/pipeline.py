"""
Estados de uma execução do pipeline de normalização.

Fluxo feliz: RECEIVED → MAPPED → VALIDATED → SUCCEEDED | REJECTED.
FAILED é terminal alternativo, alcançável a partir de RECEIVED ou MAPPED.
"""

from enum import StrEnum


class PipelineState(StrEnum):
    """
    Estados de uma execução do pipeline.

    Estados não-terminais:
        - RECEIVED: Payload e provider aceitos como entrada
        - MAPPED: Expressão do provider avaliada com sucesso
        - VALIDATED: Schema avaliado contra o candidato

    Estados terminais:
        - SUCCEEDED: Registro normalizado válido
        - REJECTED: Execução completa, mas o registro não atende o schema
        - FAILED: O pipeline não conseguiu completar (provider, avaliação)
    """

    RECEIVED = "RECEIVED"
    MAPPED = "MAPPED"
    VALIDATED = "VALIDATED"

    SUCCEEDED = "SUCCEEDED"
    REJECTED = "REJECTED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


TERMINAL_STATES: frozenset[PipelineState] = frozenset({
    PipelineState.SUCCEEDED,
    PipelineState.REJECTED,
    PipelineState.FAILED,
})

DEFAULT_INITIAL_STATE: PipelineState = PipelineState.RECEIVED


def is_terminal(state: PipelineState) -> bool:
    """Verifica se o estado encerra a execução."""
    return state in TERMINAL_STATES
