"""
Numerical Safeguards: Epsilon Primitives

Модуль содержит epsilon-параметры и предикаты, на которых основана
проверка знаменателя в calculator.divide:
- Машинный epsilon для float64 (IEEE-754 double)
- Проверка "величина меньше epsilon" (magnitude threshold)
- Проверка на NaN/Inf
- Сравнение float с толерантностью

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порог деления: ровно машинный epsilon, а не точное сравнение с нулём
2. Все функции чистые и детерминированные
"""

import math
import sys
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Машинный epsilon для float64: наименьшая разница, представимая относительно 1.0
# (≈ 2.220446049250313e-16). Используется как порог "нулевого" знаменателя.
MACHINE_EPSILON: Final[float] = sys.float_info.epsilon

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close (100 машинных epsilon)
EPS_FLOAT_COMPARE_ABS: Final[float] = MACHINE_EPSILON * 100


# =============================================================================
# EPSILON-ПОРОГИ
# =============================================================================


def is_below_epsilon(value: float, eps: float = MACHINE_EPSILON) -> bool:
    """
    Проверка, что абсолютная величина значения меньше epsilon.

    Это порог по модулю, а не сравнение с нулём: очень малые ненулевые
    значения (например, 1e-20) тоже считаются "нулевыми".

    Args:
        value: Проверяемое значение
        eps: Порог (default: MACHINE_EPSILON)

    Returns:
        True если abs(value) < eps. Для NaN всегда False.

    Raises:
        ValueError: Если eps <= 0

    Examples:
        >>> is_below_epsilon(0.0)
        True
        >>> is_below_epsilon(1e-20)
        True
        >>> is_below_epsilon(MACHINE_EPSILON)
        False
        >>> is_below_epsilon(2.0)
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return abs(value) < eps


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 100 * MACHINE_EPSILON)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
