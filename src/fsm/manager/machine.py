"""
Rastreador de estado (PipelineRun) de uma execução do pipeline.

Uma instância por chamada a process(); nunca compartilhada entre
requisições.
"""

from typing import Any

from fsm.states.pipeline import DEFAULT_INITIAL_STATE, PipelineState, is_terminal
from fsm.transitions.rules import is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult


class PipelineStateError(RuntimeError):
    """Transição não declarada em VALID_TRANSITIONS (erro de programação)."""


class PipelineRun:
    """
    Estado atual e histórico de uma execução.

    Attributes:
        current_state: Estado atual
        history: Transições realizadas
        provider_key: Provider da execução (para logs)
    """

    __slots__ = ("_current_state", "_history", "_provider_key")

    def __init__(self, provider_key: str = "") -> None:
        self._current_state = DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._provider_key = provider_key

    @property
    def current_state(self) -> PipelineState:
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def provider_key(self) -> str:
        return self._provider_key

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_state)

    def transition(self, target: PipelineState, trigger: str) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
        )
        self._current_state = target
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)

    def advance(self, target: PipelineState, trigger: str) -> StateTransition:
        """
        Aplica a transição ou levanta PipelineStateError.

        Raises:
            PipelineStateError: Se a transição não for permitida
        """
        result = self.transition(target, trigger)
        if not result.success or result.transition is None:
            raise PipelineStateError(result.error_reason or "transição recusada")
        return result.transition

    def get_history_summary(self) -> list[dict[str, Any]]:
        """Histórico em formato seguro para logs."""
        return [t.to_log_dict() for t in self._history]
