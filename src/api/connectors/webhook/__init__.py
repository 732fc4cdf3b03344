"""Webhook de chargeback: parsing do corpo e detecção de provider."""

from .detection import DETECTION_RULES, detect_provider, resolve_provider_key
from .receive import (
    InvalidEnvelopeError,
    InvalidJsonError,
    WebhookEnvelope,
    WebhookRequestError,
    parse_json_body,
    parse_webhook_envelope,
)

__all__ = [
    "DETECTION_RULES",
    "InvalidEnvelopeError",
    "InvalidJsonError",
    "WebhookEnvelope",
    "WebhookRequestError",
    "detect_provider",
    "parse_json_body",
    "parse_webhook_envelope",
    "resolve_provider_key",
]
