"""
Calculator: Четыре арифметические операции с Outcome-ошибками

Модуль предоставляет чистые функции над float64:
- add / subtract / multiply: прямые операторы, семантика IEEE-754 без проверок
- divide: Outcome[float, CalculatorError], отказ при |b| < MACHINE_EPSILON
- error_to_string: текстовое описание кода ошибки (тотальная функция)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. divide возвращает Success тогда и только тогда, когда abs(b) >= MACHINE_EPSILON
2. Ошибки возвращаются как Failure, исключения не используются
3. Функции не имеют состояния и безопасны для одновременного вызова из потоков
"""

from mylib.core.domain.errors import CalculatorError
from mylib.core.domain.outcome import Failure, Outcome, Success
from mylib.core.math.numerical_safeguards import MACHINE_EPSILON, is_below_epsilon


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: float, b: float) -> float:
    """Сумма a + b."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Разность a - b."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Произведение a * b."""
    return a * b


def divide(a: float, b: float) -> Outcome[float, CalculatorError]:
    """
    Деление a / b с проверкой знаменателя.

    Знаменатель считается нулевым, если abs(b) < MACHINE_EPSILON. Это порог
    по модулю: 0.0, -0.0 и 1e-20 одинаково дают DIVISION_BY_ZERO.
    Числитель на результат проверки не влияет; Inf/NaN в частном не
    перехватываются.

    Args:
        a: Числитель
        b: Знаменатель

    Returns:
        Success(a / b) или Failure(CalculatorError.DIVISION_BY_ZERO)

    Examples:
        >>> divide(10.0, 2.0)
        Success(value=5.0)
        >>> divide(10.0, 0.0)
        Failure(error=<CalculatorError.DIVISION_BY_ZERO: 'division_by_zero'>)
    """
    if is_below_epsilon(b, MACHINE_EPSILON):
        return Failure(CalculatorError.DIVISION_BY_ZERO)

    return Success(a / b)


# =============================================================================
# ОПИСАНИЕ ОШИБОК
# =============================================================================


def error_to_string(error: CalculatorError) -> str:
    """
    Человекочитаемое описание кода ошибки.

    Args:
        error: Код ошибки

    Returns:
        "Division by zero error", "Invalid operation error" или
        "Unknown error" для любого другого значения, включая строки
        с тем же значением, что у члена CalculatorError
    """
    if error is CalculatorError.DIVISION_BY_ZERO:
        return "Division by zero error"
    elif error is CalculatorError.INVALID_OPERATION:
        return "Invalid operation error"
    else:
        return "Unknown error"
