"""Endpoints de webhook de chargeback.

Endpoints:
- POST /webhook: envelope {"payload": ..., "provider": opcional}
- POST /webhook/{provider_key}: corpo é o payload do provider

Fluxo:
1. Lê o corpo bruto e define o correlation_id
2. Decide o provider (path → campo explícito → detecção → padrão)
3. Executa o pipeline em thread do pool padrão (não bloqueia o event loop)
4. Serializa o desfecho (200 / 400 / 500)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.webhook import (
    InvalidEnvelopeError,
    InvalidJsonError,
    parse_json_body,
    parse_webhook_envelope,
    resolve_provider_key,
)
from api.routes.webhook.responses import build_error_response, build_outcome_response
from app.observability import (
    CORRELATION_ID_HEADER,
    correlation_id_from_header,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_pipeline_settings

logger = logging.getLogger(__name__)

router = APIRouter()


async def _run_pipeline(
    request: Request,
    provider_key: str,
    payload: Any,
    provider_source: str,
) -> Response:
    correlation_id = get_correlation_id()
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        logger.error(
            "webhook_pipeline_unavailable",
            extra={"correlation_id": correlation_id, "provider": provider_key},
        )
        return build_error_response(
            "pipeline_not_ready",
            status.HTTP_503_SERVICE_UNAVAILABLE,
            correlation_id,
        )

    logger.info(
        "webhook_received",
        extra={
            "correlation_id": correlation_id,
            "provider": provider_key,
            "provider_source": provider_source,
        },
    )

    # Contextos são copiados por to_thread: correlation_id segue para os logs do pipeline
    outcome = await asyncio.to_thread(pipeline.process, provider_key, payload)

    logger.info(
        "webhook_processed",
        extra={
            "correlation_id": correlation_id,
            "provider": provider_key,
            "state": outcome.state.value,
        },
    )
    return build_outcome_response(outcome, correlation_id)


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> Response:
    """Recebe webhook no envelope genérico.

    Corpo esperado:
        {"payload": {...}, "provider": "stripe"}  # provider é opcional

    Returns:
        JSONResponse com o desfecho do pipeline ou erro de borda (400/503).
    """
    token = set_correlation_id(
        correlation_id_from_header(request.headers.get(CORRELATION_ID_HEADER))
    )
    try:
        raw_body = await request.body()
        try:
            envelope = parse_webhook_envelope(raw_body)
        except (InvalidJsonError, InvalidEnvelopeError) as exc:
            logger.warning(
                "webhook_body_invalid",
                extra={
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return build_error_response(
                str(exc), status.HTTP_400_BAD_REQUEST, get_correlation_id()
            )

        settings = get_pipeline_settings()
        provider_key, provider_source = resolve_provider_key(
            envelope.provider,
            envelope.payload,
            default_provider=settings.default_provider,
            detection_enabled=settings.provider_detection_enabled,
        )
        return await _run_pipeline(request, provider_key, envelope.payload, provider_source)
    finally:
        reset_correlation_id(token)


@router.post("/{provider_key}", response_model=None)
async def receive_provider_webhook(provider_key: str, request: Request) -> Response:
    """Recebe webhook com provider explícito no path.

    O corpo é o payload do provider sem envelope.
    """
    token = set_correlation_id(
        correlation_id_from_header(request.headers.get(CORRELATION_ID_HEADER))
    )
    try:
        raw_body = await request.body()
        try:
            payload = parse_json_body(raw_body)
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_body_invalid",
                extra={
                    "correlation_id": get_correlation_id(),
                    "provider": provider_key,
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return build_error_response(
                str(exc), status.HTTP_400_BAD_REQUEST, get_correlation_id()
            )
        return await _run_pipeline(request, provider_key, payload, "path")
    finally:
        reset_correlation_id(token)
