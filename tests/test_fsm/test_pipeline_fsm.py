"""Testes da máquina de estados de execução do pipeline."""

import pytest

from fsm import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    PipelineRun,
    PipelineState,
    PipelineStateError,
    StateTransition,
    TransitionResult,
    get_valid_targets,
    is_terminal,
    is_transition_valid,
    validate_transition_map,
)


class TestTransitionMap:
    def test_map_is_consistent(self) -> None:
        assert validate_transition_map() == []

    def test_terminal_states(self) -> None:
        assert TERMINAL_STATES == frozenset(
            {PipelineState.SUCCEEDED, PipelineState.REJECTED, PipelineState.FAILED}
        )
        for state in TERMINAL_STATES:
            assert is_terminal(state)
            assert get_valid_targets(state) == frozenset()

    @pytest.mark.parametrize(
        ("source", "target", "expected"),
        [
            (PipelineState.RECEIVED, PipelineState.MAPPED, True),
            (PipelineState.RECEIVED, PipelineState.FAILED, True),
            (PipelineState.RECEIVED, PipelineState.SUCCEEDED, False),
            (PipelineState.MAPPED, PipelineState.VALIDATED, True),
            (PipelineState.VALIDATED, PipelineState.REJECTED, True),
            (PipelineState.VALIDATED, PipelineState.FAILED, False),
            (PipelineState.SUCCEEDED, PipelineState.FAILED, False),
        ],
    )
    def test_is_transition_valid(
        self, source: PipelineState, target: PipelineState, expected: bool
    ) -> None:
        assert is_transition_valid(source, target) is expected


class TestPipelineRun:
    def test_starts_in_received(self) -> None:
        run = PipelineRun(provider_key="stripe")
        assert run.current_state == DEFAULT_INITIAL_STATE == PipelineState.RECEIVED
        assert run.history == []
        assert not run.is_terminal

    def test_happy_path_history(self) -> None:
        run = PipelineRun(provider_key="stripe")
        run.advance(PipelineState.MAPPED, "expression_evaluated")
        run.advance(PipelineState.VALIDATED, "schema_checked")
        run.advance(PipelineState.SUCCEEDED, "schema_valid")

        assert run.is_terminal
        assert [t["to_state"] for t in run.get_history_summary()] == [
            "MAPPED",
            "VALIDATED",
            "SUCCEEDED",
        ]

    def test_invalid_transition_is_refused(self) -> None:
        run = PipelineRun()
        result = run.transition(PipelineState.SUCCEEDED, "skip")

        assert not result.success
        assert "RECEIVED" in (result.error_reason or "")
        assert run.current_state == PipelineState.RECEIVED

    def test_advance_raises_on_invalid_transition(self) -> None:
        run = PipelineRun()
        run.advance(PipelineState.FAILED, "unknown_provider")
        with pytest.raises(PipelineStateError):
            run.advance(PipelineState.MAPPED, "retry")

    def test_history_is_a_copy(self) -> None:
        run = PipelineRun()
        run.advance(PipelineState.MAPPED, "expression_evaluated")
        run.history.clear()
        assert len(run.history) == 1


class TestTransitionTypes:
    def test_empty_trigger_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            StateTransition(PipelineState.RECEIVED, PipelineState.MAPPED, "  ")

    def test_result_consistency(self) -> None:
        with pytest.raises(ValueError):
            TransitionResult(success=True)
        with pytest.raises(ValueError):
            TransitionResult(success=False)
