"""
Core math modules

Математические примитивы engineering notation с гарантией канонической формы.
"""

# Engineering notation: нормализация и выравнивание
from src.core.math.engineering import (
    EXPONENT_STEP,
    MAX_MAGNITUDE,
    TEN_CUBED,
    align,
    is_normalized,
    normalize,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf
    is_valid_float,
    # Epsilon comparisons
    is_close,
    # Validation
    validate_finite,
    validate_non_negative,
    validate_positive,
)

__all__ = [
    # Engineering — Constants
    "EXPONENT_STEP",
    "MAX_MAGNITUDE",
    "TEN_CUBED",
    # Engineering — Functions
    "align",
    "is_normalized",
    "normalize",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — NaN/Inf
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_non_negative",
    "validate_positive",
]
