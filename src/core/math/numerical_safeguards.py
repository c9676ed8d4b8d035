"""
Numerical Safeguards — примитивы проверки float

Модуль содержит общие проверки, которые используют HugeNumber и его тесты:
- Проверка конечности float (NaN/Inf не допускаются в мантиссу)
- Epsilon-сравнения float с учётом машинной точности
- Валидация скалярных аргументов (divisor, factor)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в мантиссу
2. Float сравнения всегда учитывают машинную точность
"""

import math
import numbers
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность сравнения мантисс.
# Выравнивание делит мантиссу на 10^d, что даёт ошибку порядка 1e-16 * 10^d,
# поэтому порог берётся с запасом относительно double epsilon.
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность (для сравнения с нулём)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Целые числа конечны всегда, даже вне диапазона double.

    Returns:
        True если значение конечное
    """
    if isinstance(value, numbers.Integral):
        return True
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

    Examples:
        >>> is_close(11.0, 11.0 + 1e-12)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ СКАЛЯРОВ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Используется для divisor: деление на ноль и на отрицательный скаляр
    вне поддерживаемого домена.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Используется для factor: масштабирование только неотрицательным скаляром.

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
