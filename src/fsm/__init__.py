"""
Módulo FSM — máquina de estados de uma execução do pipeline.

Estrutura:
    - states/: Estados (PipelineState enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - manager/: Rastreador por execução (PipelineRun)
    - types/: Tipos de dados (StateTransition, TransitionResult)
"""

from fsm.manager import PipelineRun, PipelineStateError
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    PipelineState,
    is_terminal,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import StateTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "PipelineRun",
    "PipelineState",
    "PipelineStateError",
    "StateTransition",
    "TransitionResult",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "validate_transition_map",
]
