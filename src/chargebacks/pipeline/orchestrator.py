"""Orquestrador do pipeline: registry → avaliador → validador.

Uso:
    pipeline = ChargebackPipeline(registry, evaluator, validator)
    outcome = pipeline.process("stripe", payload)

O pipeline é stateless por execução. Registry, avaliador e validador
são imutáveis após o startup e recebidos por injeção de dependência.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from app.observability import get_correlation_id, record_latency, record_outcome
from chargebacks.pipeline.outcomes import (
    EVALUATION_ERROR_MESSAGE,
    INTERNAL_ERROR_MESSAGE,
    TIMEOUT_MESSAGE,
    UNKNOWN_PROVIDER_MESSAGE,
    ErrorKind,
    Failed,
    PipelineOutcome,
    Rejected,
    Succeeded,
)
from fsm import PipelineRun, PipelineState
from utils.errors import EvaluationError, EvaluationTimeoutError, UnknownProviderError

if TYPE_CHECKING:
    from app.protocols import (
        ExpressionEvaluatorProtocol,
        ProviderRegistryProtocol,
        SchemaValidatorProtocol,
    )

logger = logging.getLogger(__name__)


class ChargebackPipeline:
    """Transforma e valida payloads de webhook de chargeback."""

    __slots__ = ("_evaluator", "_registry", "_validator")

    def __init__(
        self,
        registry: ProviderRegistryProtocol,
        evaluator: ExpressionEvaluatorProtocol,
        validator: SchemaValidatorProtocol,
    ) -> None:
        self._registry = registry
        self._evaluator = evaluator
        self._validator = validator

    @property
    def registry(self) -> ProviderRegistryProtocol:
        return self._registry

    def process(self, provider_key: str, raw_payload: Any) -> PipelineOutcome:
        """Executa o pipeline completo para um payload.

        Args:
            provider_key: Chave do provider (busca exata)
            raw_payload: Documento JSON recebido (não é modificado)

        Returns:
            Succeeded, Rejected ou Failed
        """
        started_at = time.perf_counter()
        run = PipelineRun(provider_key=provider_key)
        try:
            outcome = self._run(run, provider_key, raw_payload)
        except Exception:
            failed_from = run.current_state
            # VALIDATED não tem saída para FAILED; nesse caso o histórico para ali
            run.transition(PipelineState.FAILED, ErrorKind.INTERNAL_ERROR.value)
            logger.exception(
                "chargeback_failed",
                extra={
                    "component": "pipeline",
                    "provider": provider_key,
                    "error_kind": ErrorKind.INTERNAL_ERROR.value,
                    "state": failed_from.value,
                    "transitions": run.get_history_summary(),
                },
            )
            outcome = Failed(ErrorKind.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)

        latency_ms = (time.perf_counter() - started_at) * 1000
        correlation_id = get_correlation_id()
        record_latency("pipeline", "process", latency_ms, correlation_id)
        record_outcome(
            provider_key,
            outcome.state.value,
            error_kind=outcome.kind.value if isinstance(outcome, Failed) else None,
            correlation_id=correlation_id,
        )
        return outcome

    def _run(self, run: PipelineRun, provider_key: str, raw_payload: Any) -> PipelineOutcome:
        try:
            expression = self._registry.resolve(provider_key)
            candidate = self._evaluator.evaluate(expression, raw_payload)
        except UnknownProviderError:
            return self._fail(
                run,
                ErrorKind.UNKNOWN_PROVIDER,
                UNKNOWN_PROVIDER_MESSAGE.format(provider_key=provider_key),
            )
        except EvaluationTimeoutError as exc:
            return self._fail(run, ErrorKind.TIMEOUT, TIMEOUT_MESSAGE, detail=str(exc))
        except EvaluationError as exc:
            return self._fail(
                run, ErrorKind.EVALUATION_ERROR, EVALUATION_ERROR_MESSAGE, detail=str(exc)
            )

        run.advance(PipelineState.MAPPED, "expression_evaluated")

        result = self._validator.validate(candidate)
        run.advance(PipelineState.VALIDATED, "schema_checked")

        if not result.is_valid:
            run.advance(PipelineState.REJECTED, "schema_violations")
            logger.info(
                "chargeback_rejected",
                extra={
                    "component": "pipeline",
                    "provider": provider_key,
                    "violation_count": len(result.violations),
                    "violations": [v.as_dict() for v in result.violations],
                },
            )
            return Rejected(violations=result.violations)

        run.advance(PipelineState.SUCCEEDED, "schema_valid")
        logger.info(
            "chargeback_succeeded",
            extra={"component": "pipeline", "provider": provider_key},
        )
        return Succeeded(record=candidate)

    def _fail(
        self,
        run: PipelineRun,
        kind: ErrorKind,
        message: str,
        detail: str | None = None,
    ) -> Failed:
        run.advance(PipelineState.FAILED, kind.value)
        logger.warning(
            "chargeback_failed",
            extra={
                "component": "pipeline",
                "provider": run.provider_key,
                "error_kind": kind.value,
                "error": detail,
                "transitions": run.get_history_summary(),
            },
        )
        return Failed(kind, message)
