"""Validação do registro normalizado."""

from chargebacks.validation.schema import NormalizedChargeback
from chargebacks.validation.validator import SchemaValidator
from chargebacks.validation.violations import ValidationResult, Violation

__all__ = [
    "NormalizedChargeback",
    "SchemaValidator",
    "ValidationResult",
    "Violation",
]
