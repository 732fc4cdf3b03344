"""
Exports públicos do módulo fsm/manager.

Rastreador de estado de uma execução do pipeline.
"""

from fsm.manager.machine import PipelineRun, PipelineStateError

__all__ = [
    "PipelineRun",
    "PipelineStateError",
]
