"""Tipos de resultado da validação de schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Violation:
    """Uma restrição do schema que não foi atendida.

    Attributes:
        path: Localização no registro (raiz = "", campo = "/amount")
        message: Descrição legível da restrição violada
    """

    path: str
    message: str

    def as_dict(self) -> dict[str, Any]:
        return {"instancePath": self.path, "message": self.message}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Resultado da validação: válido ou lista ordenada de violações."""

    violations: tuple[Violation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls()

    @classmethod
    def invalid(cls, violations: list[Violation] | tuple[Violation, ...]) -> ValidationResult:
        if not violations:
            raise ValueError("resultado inválido deve conter ao menos uma violação")
        return cls(violations=tuple(violations))
