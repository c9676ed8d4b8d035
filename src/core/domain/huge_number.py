"""
HugeNumber — число произвольного порядка в engineering notation

Пара (mantissa, exponent), где value = mantissa × 10^exponent.
Арифметика выполняется прямо в нормализованной форме, без построения
полного десятичного представления. Точность ограничена double мантиссой:
система намеренно lossy.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После конструирования и после каждой операции пара нормализована:
   либо (0.0, 0), либо 1 <= |mantissa| < 1000 и exponent % 3 == 0
2. NaN/Inf никогда не попадают в мантиссу
3. Операции мутируют только receiver; второй операнд add/subtract не меняется
4. Невалидный скаляр для divide/multiply_factor не мутирует число
   (silent no-op, либо InvalidScalarError при strict=True)
"""

import logging
import math
import numbers
from typing import Any, Callable, Dict, Final, Union

from pydantic import BaseModel, Field, model_validator

from src.core.contracts import validate_huge_number
from src.core.math.engineering import align, normalize
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_REL,
    is_close,
    validate_non_negative,
    validate_positive,
)
from src.render.formatter import DEFAULT_FORMATTER

logger = logging.getLogger(__name__)

# Целые до 10^17 переводятся в float напрямую
_INT_EXACT_DIGITS: Final[int] = 17
_LOG10_2: Final[float] = math.log10(2)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidScalarError(ValueError):
    """
    Скаляр вне поддерживаемого домена.

    divide: divisor <= 0 или NaN/Inf
    multiply_factor: factor < 0 или NaN/Inf

    Возникает только при strict=True и в операторе `/`.
    Число при этом не изменяется.
    """

    pass


# =============================================================================
# HUGE NUMBER
# =============================================================================


class HugeNumber(BaseModel):
    """
    Число в engineering notation.

    Конструируется из сырой пары (не обязательно нормализованной) и
    нормализуется сразу:

        >>> HugeNumber(1000, 2)
        HugeNumber(mantissa=100.0, exponent=3)
        >>> str(HugeNumber(2.5, 9))
        '2.5 billion'

    Mutable value type: операции меняют receiver на месте и возвращают None.
    Операторы (+, -, *, /) возвращают новый экземпляр.
    """

    mantissa: float = Field(
        0.0, allow_inf_nan=False, description="Мантисса, 1 <= |mantissa| < 1000 или 0"
    )
    exponent: int = Field(0, description="Степень 10, кратна 3")

    model_config = {"extra": "forbid"}

    def __init__(self, mantissa: float = 0.0, exponent: int = 0, **data: Any):
        super().__init__(mantissa=mantissa, exponent=exponent, **data)

    @model_validator(mode="after")
    def _normalize_on_construction(self) -> "HugeNumber":
        self._normalize()
        return self

    @classmethod
    def from_value(cls, value: float) -> "HugeNumber":
        """
        Число из обычного float (exponent = 0).

        Целые, не помещающиеся в double, сначала делятся на 10^shift
        (целочисленное деление с корректным округлением), и shift уходит
        в exponent:

            >>> HugeNumber.from_value(-(10**400))
            HugeNumber(mantissa=-10.0, exponent=399)
        """
        if isinstance(value, numbers.Integral):
            value = int(value)
            shift = max(0, int(abs(value).bit_length() * _LOG10_2) - _INT_EXACT_DIGITS)
            return cls(value / 10**shift, shift)
        return cls(float(value), 0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HugeNumber":
        """
        Десериализация с проверкой JSON Schema контракта.

        Raises:
            jsonschema.ValidationError: Если data не соответствует huge_number.json
            pydantic.ValidationError: Если мантисса NaN/Inf
        """
        validate_huge_number(data)
        return cls(data["mantissa"], data["exponent"])

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def copy(self) -> "HugeNumber":
        return self.model_copy()

    # -------------------------------------------------------------------------
    # Нормализация и выравнивание
    # -------------------------------------------------------------------------

    def _normalize(self) -> None:
        self.mantissa, self.exponent = normalize(self.mantissa, self.exponent)

    def _align_with(self, other: "HugeNumber") -> float:
        """
        Приведение self и копии other к общему (большему) exponent.

        other не мутируется: выравнивается локальная копия его пары.

        Returns:
            Мантисса other в масштабе self.exponent
        """
        other_mantissa, other_exponent = other.mantissa, other.exponent
        if other_exponent < self.exponent:
            other_mantissa, _ = align(other_mantissa, other_exponent, self.exponent)
        else:
            self.mantissa, self.exponent = align(self.mantissa, self.exponent, other_exponent)
        return other_mantissa

    def _rejects_scalar(
        self,
        check: Callable[[float, str], None],
        value: float,
        name: str,
        strict: bool,
    ) -> bool:
        """True если скаляр не прошёл проверку и операция должна стать no-op."""
        try:
            check(value, name)
        except ValueError as e:
            if strict:
                raise InvalidScalarError(str(e)) from e
            logger.debug("Rejected %s=%r, %r left unchanged", name, value, self)
            return True
        return False

    # -------------------------------------------------------------------------
    # Арифметика (in-place)
    # -------------------------------------------------------------------------

    def add(self, other: "HugeNumber") -> None:
        """
        self += other.

        Операнд с меньшим exponent выравнивается к большему; операнд,
        меньший более чем в 10^12 раз, не влияет на результат.
        """
        other_mantissa = self._align_with(other)
        self.mantissa += other_mantissa
        self._normalize()

    def subtract(self, other: "HugeNumber") -> None:
        """self -= other. Результат может быть отрицательным или нулём."""
        other_mantissa = self._align_with(other)
        self.mantissa -= other_mantissa
        self._normalize()

    def multiply(self, other: "HugeNumber") -> None:
        """self *= other: мантиссы перемножаются, exponent складываются."""
        other_mantissa, other_exponent = other.mantissa, other.exponent
        self.mantissa *= other_mantissa
        self.exponent += other_exponent
        self._normalize()

    def multiply_factor(self, factor: float, *, strict: bool = False) -> None:
        """
        self *= factor для неотрицательного скаляра.

        Отрицательный или NaN/Inf factor отклоняется: число не меняется.
        Скаляр предварительно раскладывается в свою engineering пару, поэтому
        произведение мантисс не переполняет float.

        Args:
            factor: Неотрицательный конечный множитель
            strict: True → InvalidScalarError вместо silent no-op

        Raises:
            InvalidScalarError: Только при strict=True
        """
        if self._rejects_scalar(validate_non_negative, factor, "factor", strict):
            return
        self.multiply(HugeNumber.from_value(factor))

    def divide(self, divisor: float, *, strict: bool = False) -> None:
        """
        self /= divisor для строго положительного скаляра.

        Деление на ноль, на отрицательный или NaN/Inf скаляр отклоняется:
        число не меняется.

        Args:
            divisor: Положительный конечный делитель
            strict: True → InvalidScalarError вместо silent no-op

        Raises:
            InvalidScalarError: Только при strict=True
        """
        if self._rejects_scalar(validate_positive, divisor, "divisor", strict):
            return
        scale = HugeNumber.from_value(divisor)
        self.mantissa /= scale.mantissa
        self.exponent -= scale.exponent
        self._normalize()

    def pow_ten(self, n: int) -> None:
        """
        self *= 10^n.

        Точная операция для любого целого n: сдвиг exponent и нормализация
        (переносит остаток n mod 3 в мантиссу).

        Examples:
            >>> number = HugeNumber(-1000, 2)
            >>> number.pow_ten(9)
            >>> number
            HugeNumber(mantissa=-100.0, exponent=12)
        """
        self.exponent += n
        self._normalize()

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.mantissa == 0

    def exp_name(self) -> str:
        """Название степени 10 ("billion" для exponent 9, "" вне таблицы)."""
        return DEFAULT_FORMATTER.exp_name(self.exponent)

    def to_float(self) -> float:
        """
        Значение как обычный float.

        Returns:
            mantissa × 10^exponent; вне диапазона double ±inf для
            положительного exponent и 0.0 для отрицательного
        """
        try:
            return self.mantissa * 10.0**self.exponent
        except OverflowError:
            if self.exponent < 0:
                return 0.0
            return math.copysign(math.inf, self.mantissa)

    def is_close(self, other: "HugeNumber", rel_tol: float = EPS_FLOAT_COMPARE_REL) -> bool:
        """
        Сравнение с учётом машинной точности.

        Мантиссы сравниваются после выравнивания копий к общему exponent,
        поэтому 999.9999999999e3 и 1e6 считаются близкими.
        """
        left, right = self.copy(), other
        if right.exponent > left.exponent:
            left, right = right.copy(), self
        right_mantissa = left._align_with(right)
        return is_close(left.mantissa, right_mantissa, rel_tol=rel_tol)

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return DEFAULT_FORMATTER.format(self)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "Operand") -> "HugeNumber":
        operand = _as_huge_number(other)
        if operand is None:
            return NotImplemented
        result = self.copy()
        result.add(operand)
        return result

    __radd__ = __add__

    def __sub__(self, other: "Operand") -> "HugeNumber":
        operand = _as_huge_number(other)
        if operand is None:
            return NotImplemented
        result = self.copy()
        result.subtract(operand)
        return result

    def __rsub__(self, other: "Operand") -> "HugeNumber":
        result = _as_huge_number(other)
        if result is None:
            return NotImplemented
        result.subtract(self)
        return result

    def __mul__(self, other: "Operand") -> "HugeNumber":
        operand = _as_huge_number(other)
        if operand is None:
            return NotImplemented
        result = self.copy()
        result.multiply(operand)
        return result

    __rmul__ = __mul__

    def __truediv__(self, other: float) -> "HugeNumber":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        result = self.copy()
        result.divide(other, strict=True)
        return result

    def __iadd__(self, other: "Operand") -> "HugeNumber":
        operand = _as_huge_number(other)
        if operand is None:
            return NotImplemented
        self.add(operand)
        return self

    def __isub__(self, other: "Operand") -> "HugeNumber":
        operand = _as_huge_number(other)
        if operand is None:
            return NotImplemented
        self.subtract(operand)
        return self

    def __imul__(self, other: "Operand") -> "HugeNumber":
        operand = _as_huge_number(other)
        if operand is None:
            return NotImplemented
        self.multiply(operand)
        return self

    def __itruediv__(self, other: float) -> "HugeNumber":
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self.divide(other, strict=True)
        return self

    def __neg__(self) -> "HugeNumber":
        return HugeNumber(-self.mantissa, self.exponent)

    def __abs__(self) -> "HugeNumber":
        return HugeNumber(abs(self.mantissa), self.exponent)


Operand = Union[HugeNumber, int, float]


def _as_huge_number(value: Any) -> HugeNumber | None:
    """Новый HugeNumber для операнда оператора, None если тип не поддерживается."""
    if isinstance(value, HugeNumber):
        return value.copy()
    if isinstance(value, numbers.Real):
        return HugeNumber.from_value(value)
    return None
