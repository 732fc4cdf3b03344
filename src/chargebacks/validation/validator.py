"""Validação do registro candidato contra o schema fixo.

O schema (modelo pydantic) é lido uma única vez na construção e
compartilhado entre validações concorrentes. A validação não para no
primeiro erro: todas as violações são reportadas de uma vez, na ordem
requeridos → tipos, cada grupo na ordem de declaração do schema.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from chargebacks.validation.schema import NormalizedChargeback
from chargebacks.validation.violations import ValidationResult, Violation

_MISSING_ERROR_TYPE = "missing"


class SchemaValidator:
    """Valida documentos contra um modelo pydantic estrito.

    Args:
        model: Modelo que define campos obrigatórios e tipos
    """

    __slots__ = ("_field_order", "_field_types", "_model")

    def __init__(self, model: type[BaseModel] = NormalizedChargeback) -> None:
        self._model = model
        properties = model.model_json_schema().get("properties", {})
        self._field_order: tuple[str, ...] = tuple(model.model_fields)
        self._field_types: dict[str, str] = {
            name: properties.get(name, {}).get("type", "valid")
            for name in self._field_order
        }

    def validate(self, document: Any) -> ValidationResult:
        """Valida o documento sem modificá-lo.

        Returns:
            ValidationResult.valid() ou ValidationResult.invalid(violações)
        """
        if not isinstance(document, dict):
            return ValidationResult.invalid([Violation(path="", message="must be object")])

        try:
            self._model.model_validate(document)
        except ValidationError as exc:
            return ValidationResult.invalid(self._collect_violations(exc))
        return ValidationResult.valid()

    def _collect_violations(self, exc: ValidationError) -> list[Violation]:
        missing: set[str] = set()
        mistyped: set[str] = set()

        for error in exc.errors():
            loc = error.get("loc", ())
            field = loc[0] if loc else None
            if not isinstance(field, str) or field not in self._field_types:
                continue
            if error.get("type") == _MISSING_ERROR_TYPE:
                missing.add(field)
            else:
                mistyped.add(field)

        violations = [
            Violation(path="", message=f"must have required property '{field}'")
            for field in self._field_order
            if field in missing
        ]
        violations.extend(
            Violation(path=f"/{field}", message=f"must be {self._field_types[field]}")
            for field in self._field_order
            if field in mistyped
        )
        if not violations:
            violations.append(Violation(path="", message="must match schema"))
        return violations
