"""
Contract Validation Module

Модуль для валидации JSON контрактов mylib.
"""

from .validators import (
    CalculationRecordValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculation_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculationRecordValidator",
    # Functions
    "validate_calculation_record",
]
