"""Serialização de PipelineOutcome em respostas HTTP.

- Succeeded → 200 {"result": <registro>}
- Rejected  → 400 {"errors": [{"instancePath", "message"}, ...]}
- Failed    → 500 {"error": <mensagem estável>}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from fastapi.responses import JSONResponse

from app.observability import CORRELATION_ID_HEADER
from chargebacks.pipeline import Failed, Rejected, Succeeded

if TYPE_CHECKING:
    from chargebacks.pipeline import PipelineOutcome


def build_outcome_response(outcome: PipelineOutcome, correlation_id: str) -> JSONResponse:
    """Converte o desfecho do pipeline em JSONResponse."""
    if isinstance(outcome, Succeeded):
        content: dict[str, object] = {"result": outcome.record}
        status_code = status.HTTP_200_OK
    elif isinstance(outcome, Rejected):
        content = {"errors": [violation.as_dict() for violation in outcome.violations]}
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(outcome, Failed):
        content = {"error": outcome.message}
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    else:
        raise TypeError(f"desfecho desconhecido: {type(outcome).__name__}")

    return JSONResponse(
        content=content,
        status_code=status_code,
        headers={CORRELATION_ID_HEADER: correlation_id},
    )


def build_error_response(error: str, status_code: int, correlation_id: str) -> JSONResponse:
    """Resposta de erro de borda (antes de o pipeline executar)."""
    return JSONResponse(
        content={"error": error},
        status_code=status_code,
        headers={CORRELATION_ID_HEADER: correlation_id},
    )
