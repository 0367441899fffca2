"""
CalculationRecord: Запись о выполненном вычислении

Immutable Pydantic модель: операция, операнды и результат (значение или
код ошибки с текстом). Соответствует схеме contracts/schema/calculation_record.json.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from mylib.core.domain.errors import CalculatorError
from mylib.core.domain.outcome import Outcome, Success
from mylib.core.math.numerical_safeguards import is_valid_float


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Операция калькулятора"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


# =============================================================================
# CALCULATION RECORD MODEL
# =============================================================================


class CalculationRecord(BaseModel):
    """
    Модель одной выполненной операции.

    Immutable модель (frozen=True). Инвариант:
    - ok=True: value задан, error и message отсутствуют
    - ok=False: error и message заданы, value отсутствует
    """

    operation: Operation = Field(..., description="Операция (add/subtract/multiply/divide)")
    a: float = Field(..., description="Первый операнд")
    b: float = Field(..., description="Второй операнд")

    ok: bool = Field(..., description="Успешность операции")
    value: Optional[float] = Field(default=None, description="Результат при ok=True")
    error: Optional[CalculatorError] = Field(default=None, description="Код ошибки при ok=False")
    message: Optional[str] = Field(
        default=None, min_length=1, description="Текст ошибки (error_to_string)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_outcome_consistency(self) -> "CalculationRecord":
        """Ровно одно из value/error должно присутствовать."""
        if self.ok:
            if self.value is None:
                raise ValueError("ok record must carry a value")
            if self.error is not None or self.message is not None:
                raise ValueError("ok record must not carry an error")
        else:
            if self.error is None or self.message is None:
                raise ValueError("failed record must carry error and message")
            if self.value is not None:
                raise ValueError("failed record must not carry a value")
        return self

    @classmethod
    def from_outcome(
        cls,
        operation: Operation,
        a: float,
        b: float,
        outcome: "Outcome[float, CalculatorError]",
    ) -> "CalculationRecord":
        """
        Построение записи из Outcome.

        Args:
            operation: Выполненная операция
            a: Первый операнд
            b: Второй операнд
            outcome: Результат операции (Success или Failure)

        Returns:
            CalculationRecord; для Failure текст берётся из error_to_string
        """
        if isinstance(outcome, Success):
            return cls(operation=operation, a=a, b=b, ok=True, value=outcome.value)

        # Локальный импорт: calculator импортирует domain
        from mylib.calculator import error_to_string

        return cls(
            operation=operation,
            a=a,
            b=b,
            ok=False,
            error=outcome.error,
            message=error_to_string(outcome.error),
        )

    def is_finite(self) -> bool:
        """Все числовые поля (a, b, value) конечны."""
        numbers = [self.a, self.b] + ([self.value] if self.value is not None else [])
        return all(is_valid_float(x) for x in numbers)

    def to_json_dict(self) -> dict[str, Any]:
        """
        JSON-совместимый dict (enum → строковые значения).

        Inf/NaN не представимы в стандартном JSON, поэтому такие записи
        не сериализуются.

        Raises:
            ValueError: Если a, b или value равны NaN/Inf
        """
        if not self.is_finite():
            raise ValueError(
                f"record with non-finite numbers is not JSON-serializable: "
                f"a={self.a}, b={self.b}, value={self.value}"
            )
        return self.model_dump(mode="json")
