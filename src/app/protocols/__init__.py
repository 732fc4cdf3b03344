"""Protocolos e contratos do núcleo da aplicação."""

from .evaluator import ExpressionEvaluatorProtocol
from .registry import ProviderRegistryProtocol
from .validator import SchemaValidatorProtocol

__all__ = [
    "ExpressionEvaluatorProtocol",
    "ProviderRegistryProtocol",
    "SchemaValidatorProtocol",
]
