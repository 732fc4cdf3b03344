"""Parse inicial do corpo do webhook (sem PII nos erros)."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class WebhookRequestError(ValueError):
    """Erro base para falhas de parsing do webhook."""


class InvalidJsonError(WebhookRequestError):
    """Corpo não é JSON válido."""


class InvalidEnvelopeError(WebhookRequestError):
    """JSON válido, mas sem o envelope esperado."""


class WebhookEnvelope(BaseModel):
    """Envelope do endpoint genérico `POST /webhook`.

    Attributes:
        payload: Documento enviado pelo provider (qualquer JSON)
        provider: Chave do provider, quando o chamador a informa
    """

    model_config = ConfigDict(extra="ignore")

    payload: Any
    provider: str | None = None


def parse_json_body(raw_body: bytes) -> Any:
    """Desserializa o corpo bruto.

    Raises:
        InvalidJsonError: Se o corpo estiver vazio ou não for JSON
    """
    if not raw_body:
        raise InvalidJsonError("empty_body")
    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc


def parse_webhook_envelope(raw_body: bytes) -> WebhookEnvelope:
    """Desserializa e valida o envelope `{"payload": ..., "provider": ...}`.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido
        InvalidEnvelopeError: Se não for objeto ou faltar `payload`
    """
    body = parse_json_body(raw_body)
    if not isinstance(body, dict) or "payload" not in body:
        raise InvalidEnvelopeError("invalid_envelope")
    try:
        return WebhookEnvelope.model_validate(body)
    except ValidationError as exc:
        raise InvalidEnvelopeError("invalid_envelope") from exc
