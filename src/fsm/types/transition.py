"""
Tipos para registrar transições do pipeline.

Os registros não carregam timestamp nem dados do payload: duas
execuções com a mesma entrada produzem o mesmo histórico.
"""

from dataclasses import dataclass
from typing import Any

from fsm.states.pipeline import PipelineState


@dataclass(frozen=True, slots=True)
class StateTransition:
    """
    Transição realizada em uma execução do pipeline.

    Attributes:
        from_state: Estado de origem
        to_state: Estado de destino
        trigger: Gatilho (ex: 'expression_evaluated', 'unknown_provider')
    """

    from_state: PipelineState
    to_state: PipelineState
    trigger: str

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs."""
        return {
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """
    Resultado de uma tentativa de transição.

    Attributes:
        success: Se a transição foi aplicada
        transition: Dados da transição (se success=True)
        error_reason: Motivo da recusa (se success=False)
    """

    success: bool
    transition: StateTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
