"""
Core math modules для mylib

Epsilon-параметры и предикаты для численно корректных проверок.
"""

from mylib.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    MACHINE_EPSILON,
    # Epsilon thresholds
    is_below_epsilon,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_close,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "MACHINE_EPSILON",
    # Epsilon thresholds
    "is_below_epsilon",
    # NaN/Inf checks
    "is_valid_float",
    # Epsilon comparisons
    "is_close",
]
