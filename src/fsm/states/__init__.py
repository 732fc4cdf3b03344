"""
Exports públicos do módulo fsm/states.

Estados de uma execução do pipeline de normalização.
"""

from fsm.states.pipeline import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    PipelineState,
    is_terminal,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "PipelineState",
    "is_terminal",
]
