"""
CalculatorError: Коды ошибок калькулятора

Ошибки вычислений передаются как значения (внутри Failure), а не как
исключения. Текстовое описание кода: calculator.error_to_string.
"""

from enum import Enum


class CalculatorError(str, Enum):
    """Коды ошибок операций калькулятора.

    - DIVISION_BY_ZERO: знаменатель по модулю меньше машинного epsilon
    - INVALID_OPERATION: зарезервирован, ни одна операция его не возвращает
    """

    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_OPERATION = "invalid_operation"
