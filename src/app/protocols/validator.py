"""Protocolo do validador de schema."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from chargebacks.validation import ValidationResult


class SchemaValidatorProtocol(Protocol):
    """Contrato mínimo para validação do registro candidato."""

    def validate(self, document: Any) -> ValidationResult: ...
