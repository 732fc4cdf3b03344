"""Detecção do provider pelo formato do payload.

Usada apenas quando o chamador não informa o provider. As regras olham
somente campos de envelope do evento, nunca dados da disputa.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def _looks_like_stripe(payload: dict[str, Any]) -> bool:
    event_type = payload.get("type")
    if isinstance(event_type, str) and event_type.startswith("charge.dispute."):
        return True
    return payload.get("object") == "event" and isinstance(payload.get("data"), dict)


def _looks_like_paypal(payload: dict[str, Any]) -> bool:
    event_type = payload.get("event_type")
    return isinstance(event_type, str) and event_type.startswith("CUSTOMER.DISPUTE")


def _looks_like_adyen(payload: dict[str, Any]) -> bool:
    return isinstance(payload.get("notificationItems"), list)


# Ordem importa: a primeira regra que casar define o provider
DETECTION_RULES: tuple[tuple[str, Callable[[dict[str, Any]], bool]], ...] = (
    ("stripe", _looks_like_stripe),
    ("paypal", _looks_like_paypal),
    ("adyen", _looks_like_adyen),
)


def detect_provider(payload: Any) -> str | None:
    """Retorna a chave do provider reconhecido ou None."""
    if not isinstance(payload, dict):
        return None
    for provider_key, matches in DETECTION_RULES:
        if matches(payload):
            return provider_key
    return None


def resolve_provider_key(
    explicit: str | None,
    payload: Any,
    default_provider: str,
    detection_enabled: bool = True,
) -> tuple[str, str]:
    """Decide o provider de uma requisição.

    Prioridade: campo explícito → detecção → provider padrão.

    Returns:
        (provider_key, origem) onde origem é "explicit", "detected" ou "default"
    """
    if explicit:
        return explicit, "explicit"
    if detection_enabled:
        detected = detect_provider(payload)
        if detected:
            return detected, "detected"
    return default_provider, "default"
