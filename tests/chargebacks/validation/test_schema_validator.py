"""Testes do validador de schema do registro normalizado."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from chargebacks.validation import SchemaValidator, ValidationResult, Violation


@pytest.fixture(scope="module")
def validator() -> SchemaValidator:
    return SchemaValidator()


def _record(**overrides: Any) -> dict[str, Any]:
    record = {
        "transaction_id": "ch_98765",
        "reason": "fraudulent",
        "currency": "USD",
        "amount": 25.99,
        "provider": "stripe",
    }
    record.update(overrides)
    return record


class TestValidRecords:
    def test_complete_record_is_valid(self, validator: SchemaValidator) -> None:
        result = validator.validate(_record())
        assert result.is_valid
        assert result.violations == ()

    def test_integer_amount_is_a_number(self, validator: SchemaValidator) -> None:
        assert validator.validate(_record(amount=100)).is_valid

    def test_extra_fields_are_allowed(self, validator: SchemaValidator) -> None:
        assert validator.validate(_record(dispute_id="dp_1")).is_valid

    def test_document_is_not_mutated(self, validator: SchemaValidator) -> None:
        document = _record(amount="25.99")
        snapshot = copy.deepcopy(document)
        validator.validate(document)
        assert document == snapshot


class TestViolations:
    def test_missing_fields_are_reported_in_order(self, validator: SchemaValidator) -> None:
        result = validator.validate({"amount": 10.0, "provider": "stripe"})

        assert not result.is_valid
        assert result.violations == (
            Violation("", "must have required property 'transaction_id'"),
            Violation("", "must have required property 'reason'"),
            Violation("", "must have required property 'currency'"),
        )

    def test_string_amount_is_a_type_violation(self, validator: SchemaValidator) -> None:
        result = validator.validate(_record(amount="25.99"))
        assert result.violations == (Violation("/amount", "must be number"),)

    def test_boolean_amount_is_not_a_number(self, validator: SchemaValidator) -> None:
        result = validator.validate(_record(amount=True))
        assert result.violations == (Violation("/amount", "must be number"),)

    def test_null_value_is_a_type_violation(self, validator: SchemaValidator) -> None:
        result = validator.validate(_record(currency=None))
        assert result.violations == (Violation("/currency", "must be string"),)

    def test_required_before_type_violations(self, validator: SchemaValidator) -> None:
        result = validator.validate({"transaction_id": 1, "amount": "x", "provider": "stripe"})

        assert [v.as_dict() for v in result.violations] == [
            {"instancePath": "", "message": "must have required property 'reason'"},
            {"instancePath": "", "message": "must have required property 'currency'"},
            {"instancePath": "/transaction_id", "message": "must be string"},
            {"instancePath": "/amount", "message": "must be number"},
        ]

    @pytest.mark.parametrize("document", [None, [], "texto", 42])
    def test_non_object_document(self, validator: SchemaValidator, document: Any) -> None:
        result = validator.validate(document)
        assert result.violations == (Violation("", "must be object"),)


class TestValidationResult:
    def test_invalid_requires_violations(self) -> None:
        with pytest.raises(ValueError):
            ValidationResult.invalid([])

    def test_valid_has_no_violations(self) -> None:
        assert ValidationResult.valid().is_valid
