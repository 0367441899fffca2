"""
mylib: калькулятор с ошибками как значениями

Четыре арифметические операции над float64; деление возвращает Outcome
(Success или Failure с CalculatorError) вместо исключения.
"""

from mylib.calculator import add, divide, error_to_string, multiply, subtract
from mylib.core.domain import (
    CalculationRecord,
    CalculatorError,
    Failure,
    Operation,
    Outcome,
    Success,
    UnwrapError,
)
from mylib.core.math import MACHINE_EPSILON

__version__ = "1.0.0"

__all__ = [
    # Operations
    "add",
    "subtract",
    "multiply",
    "divide",
    "error_to_string",
    # Domain
    "CalculatorError",
    "Outcome",
    "Success",
    "Failure",
    "UnwrapError",
    "CalculationRecord",
    "Operation",
    # Constants
    "MACHINE_EPSILON",
]
