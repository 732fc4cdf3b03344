"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ChargebackMapperError,
    CompileError,
    DuplicateProviderError,
    EvaluationError,
    EvaluationTimeoutError,
    InvalidProviderKeyError,
    MappingConfigError,
    MappingLoadError,
    RegistryFrozenError,
    UnknownProviderError,
)

__all__ = [
    "ChargebackMapperError",
    "CompileError",
    "DuplicateProviderError",
    "EvaluationError",
    "EvaluationTimeoutError",
    "InvalidProviderKeyError",
    "MappingConfigError",
    "MappingLoadError",
    "RegistryFrozenError",
    "UnknownProviderError",
]
