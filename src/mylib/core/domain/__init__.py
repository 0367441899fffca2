"""
Domain models and value objects.

Contains error codes, the Outcome tagged union and CalculationRecord.
"""

from mylib.core.domain.errors import CalculatorError
from mylib.core.domain.outcome import Failure, Outcome, Success, UnwrapError
from mylib.core.domain.record import CalculationRecord, Operation

__all__ = [
    # Errors
    "CalculatorError",
    # Outcome
    "Outcome",
    "Success",
    "Failure",
    "UnwrapError",
    # Record model
    "CalculationRecord",
    "Operation",
]
