"""
Exports públicos do módulo fsm/types.

Tipos para registrar transições do pipeline.
"""

from fsm.types.transition import StateTransition, TransitionResult

__all__ = [
    "StateTransition",
    "TransitionResult",
]
