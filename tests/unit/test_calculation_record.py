"""
Tests for CalculationRecord and JSON Schema contracts

Покрывает:
- Построение записи из Success / Failure
- Инвариант согласованности ok/value/error (Pydantic model_validator)
- Immutability (frozen=True)
- JSON сериализация и соответствие calculation_record.json
- Детекция нарушений схемы
"""

import math

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from mylib.calculator import divide
from mylib.core.contracts import (
    CalculationRecordValidator,
    SchemaLoader,
    validate_calculation_record,
)
from mylib.core.domain import CalculationRecord, CalculatorError, Operation, Success


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def ok_record():
    """Запись успешного деления."""
    return CalculationRecord.from_outcome(Operation.DIVIDE, 10.0, 2.0, divide(10.0, 2.0))


@pytest.fixture
def failed_record():
    """Запись деления на ноль."""
    return CalculationRecord.from_outcome(Operation.DIVIDE, 10.0, 0.0, divide(10.0, 0.0))


@pytest.fixture
def validator():
    return CalculationRecordValidator()


# =============================================================================
# MODEL
# =============================================================================


class TestFromOutcome:
    """Тесты для CalculationRecord.from_outcome"""

    def test_success_record(self, ok_record) -> None:
        assert ok_record.ok is True
        assert ok_record.value == 5.0
        assert ok_record.error is None
        assert ok_record.message is None
        assert ok_record.operation is Operation.DIVIDE

    def test_failure_record_carries_message(self, failed_record) -> None:
        assert failed_record.ok is False
        assert failed_record.value is None
        assert failed_record.error is CalculatorError.DIVISION_BY_ZERO
        assert failed_record.message == "Division by zero error"

    def test_arithmetic_record(self) -> None:
        record = CalculationRecord.from_outcome(Operation.ADD, 2.0, 3.0, Success(5.0))
        assert record.ok
        assert record.value == 5.0


class TestConsistency:
    """Инвариант: ровно одно из value/error"""

    def test_ok_without_value_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must carry a value"):
            CalculationRecord(operation="add", a=1.0, b=2.0, ok=True)

    def test_ok_with_error_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not carry an error"):
            CalculationRecord(
                operation="add", a=1.0, b=2.0, ok=True, value=3.0,
                error="division_by_zero",
            )

    def test_failed_without_message_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must carry error and message"):
            CalculationRecord(operation="divide", a=1.0, b=0.0, ok=False, error="division_by_zero")

    def test_failed_with_value_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not carry a value"):
            CalculationRecord(
                operation="divide", a=1.0, b=0.0, ok=False, value=1.0,
                error="division_by_zero", message="Division by zero error",
            )

    def test_unknown_operation_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CalculationRecord(operation="modulo", a=1.0, b=2.0, ok=True, value=1.0)

    def test_enum_coercion_from_strings(self) -> None:
        record = CalculationRecord(
            operation="divide", a=1.0, b=0.0, ok=False,
            error="division_by_zero", message="Division by zero error",
        )
        assert record.operation is Operation.DIVIDE
        assert record.error is CalculatorError.DIVISION_BY_ZERO

    def test_frozen(self, ok_record) -> None:
        with pytest.raises(ValidationError):
            ok_record.value = 6.0


# =============================================================================
# JSON SCHEMA
# =============================================================================


class TestSchema:
    """Тесты calculation_record.json"""

    def test_schema_loads_and_is_cached(self) -> None:
        loader = SchemaLoader()
        schema = loader.load_schema("calculation_record")
        assert schema["title"] == "CalculationRecord"
        assert loader.load_schema("calculation_record") is schema

    def test_missing_schema_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir_raises(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_raises(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestContractValidation:
    """Сериализованные записи соответствуют схеме"""

    def test_ok_record_json(self, ok_record) -> None:
        data = ok_record.to_json_dict()
        assert data == {
            "operation": "divide",
            "a": 10.0,
            "b": 2.0,
            "ok": True,
            "value": 5.0,
            "error": None,
            "message": None,
        }
        validate_calculation_record(data)

    def test_failed_record_json(self, failed_record) -> None:
        data = failed_record.to_json_dict()
        assert data["error"] == "division_by_zero"
        validate_calculation_record(data)

    def test_roundtrip_through_model(self, failed_record) -> None:
        assert CalculationRecord.model_validate(failed_record.to_json_dict()) == failed_record

    def test_ok_without_value_violates_schema(self, validator) -> None:
        data = {"operation": "add", "a": 1.0, "b": 2.0, "ok": True}
        assert not validator.is_valid(data)
        with pytest.raises(SchemaValidationError):
            validator.validate(data)

    def test_failed_without_message_violates_schema(self, validator) -> None:
        data = {"operation": "divide", "a": 1.0, "b": 0.0, "ok": False, "error": "division_by_zero"}
        assert not validator.is_valid(data)

    def test_unknown_error_code_violates_schema(self, validator, failed_record) -> None:
        data = failed_record.to_json_dict()
        data["error"] = "overflow"
        errors = list(validator.iter_errors(data))
        assert errors

    def test_extra_property_violates_schema(self, validator, ok_record) -> None:
        data = ok_record.to_json_dict()
        data["timestamp"] = 0
        assert not validator.is_valid(data)


class TestNonFiniteRecords:
    """NaN/Inf допускаются в модели, но не сериализуются в JSON"""

    def test_infinite_quotient_record(self) -> None:
        record = CalculationRecord.from_outcome(
            Operation.DIVIDE, math.inf, 2.0, divide(math.inf, 2.0)
        )
        assert record.ok
        assert record.value == math.inf
        assert not record.is_finite()

        with pytest.raises(ValueError, match="non-finite"):
            record.to_json_dict()

    def test_nan_operand_in_failed_record(self) -> None:
        record = CalculationRecord.from_outcome(
            Operation.DIVIDE, math.nan, 0.0, divide(math.nan, 0.0)
        )
        assert record.error is CalculatorError.DIVISION_BY_ZERO
        assert not record.is_finite()

        with pytest.raises(ValueError, match="non-finite"):
            record.to_json_dict()

    def test_finite_record_is_serializable(self, ok_record, failed_record) -> None:
        assert ok_record.is_finite()
        assert failed_record.is_finite()
        validate_calculation_record(failed_record.to_json_dict())
