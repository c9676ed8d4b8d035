"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки
2. Epsilon-сравнения float
3. Валидацию скаляров (divisor, factor)
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    validate_finite,
    validate_non_negative,
    validate_positive,
)


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)
        assert is_valid_float(5e-324)

    def test_nan_and_inf(self) -> None:
        """NaN/Inf невалидны"""
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    def test_integers_beyond_double_range(self) -> None:
        """Целые вне диапазона double конечны"""
        assert is_valid_float(10**400)
        assert is_valid_float(-(10**400))


class TestIsClose:
    """Тесты для is_close"""

    def test_defaults(self) -> None:
        """Толерантности по умолчанию"""
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_relative(self) -> None:
        """Относительная толерантность"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(999.0, 999.0 * (1 + 1e-10))
        assert not is_close(1.0, 1.1)

    def test_absolute_near_zero(self) -> None:
        """Абсолютная толерантность около нуля"""
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-6)


class TestValidation:
    """Тесты валидации скаляров"""

    def test_validate_finite(self) -> None:
        """NaN/Inf → ValueError"""
        validate_finite(1.0, "value")
        with pytest.raises(ValueError, match="value must be a valid float"):
            validate_finite(math.nan, "value")

    def test_validate_positive(self) -> None:
        """Строго положительные значения"""
        validate_positive(1e-300, "divisor")
        with pytest.raises(ValueError, match="divisor must be positive"):
            validate_positive(0.0, "divisor")
        with pytest.raises(ValueError, match="divisor must be positive"):
            validate_positive(-2.0, "divisor")
        with pytest.raises(ValueError, match="divisor must be a valid float"):
            validate_positive(math.inf, "divisor")

    def test_validate_non_negative(self) -> None:
        """Неотрицательные значения, ноль допустим"""
        validate_non_negative(0.0, "factor")
        validate_non_negative(2.0, "factor")
        with pytest.raises(ValueError, match="factor must be non-negative"):
            validate_non_negative(-1e-300, "factor")
        with pytest.raises(ValueError, match="factor must be a valid float"):
            validate_non_negative(math.nan, "factor")

    def test_huge_integers(self) -> None:
        """Целые вне диапазона double проверяются по знаку"""
        validate_positive(10**400, "divisor")
        validate_non_negative(10**400, "factor")
        with pytest.raises(ValueError, match="divisor must be positive"):
            validate_positive(-(10**400), "divisor")
