"""
Regras de transição válidas entre estados do pipeline.

O mapa é a fonte única de verdade: PipelineRun recusa qualquer
transição que não esteja declarada aqui.
"""

from fsm.states.pipeline import TERMINAL_STATES, PipelineState

TransitionMap = dict[PipelineState, frozenset[PipelineState]]

VALID_TRANSITIONS: TransitionMap = {
    # RECEIVED: provider resolvido e expressão avaliada, ou falha
    PipelineState.RECEIVED: frozenset({
        PipelineState.MAPPED,
        PipelineState.FAILED,
    }),

    # MAPPED: validação executada, ou falha inesperada
    PipelineState.MAPPED: frozenset({
        PipelineState.VALIDATED,
        PipelineState.FAILED,
    }),

    # VALIDATED: resultado da validação decide o desfecho
    PipelineState.VALIDATED: frozenset({
        PipelineState.SUCCEEDED,
        PipelineState.REJECTED,
    }),

    PipelineState.SUCCEEDED: frozenset(),
    PipelineState.REJECTED: frozenset(),
    PipelineState.FAILED: frozenset(),
}


def get_valid_targets(state: PipelineState) -> frozenset[PipelineState]:
    """Retorna os estados de destino válidos (vazio se terminal)."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: PipelineState, to_state: PipelineState) -> bool:
    """
    Verifica se uma transição é válida segundo as regras definidas.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino

    Returns:
        True se a transição é permitida, False caso contrário
    """
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in PipelineState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        targets = VALID_TRANSITIONS.get(state, frozenset())
        if targets:
            errors.append(
                f"Estado terminal {state.name} não deveria ter transições: {targets}"
            )

    return errors
