"""
HugeNumber Formatter — человекочитаемое представление engineering notation

Рендеринг:
- exponent с названием: "<mantissa> <name>", например "2.5 billion"
- exponent без названия (0 или вне таблицы): голая мантисса с фиксированным
  числом знаков после запятой, например "11.000"

Formatter не зависит от HugeNumber: принимает любой объект с атрибутами
mantissa/exponent или саму пару.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from src.render.names import exp_name


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация рендеринга.

    bare_decimals: знаков после запятой для мантиссы без названия
    named_decimals: знаков после запятой для мантиссы с названием
        (None → кратчайшее точное представление float без хвоста ".0")
    separator: разделитель между мантиссой и названием
    """

    bare_decimals: int = 3
    named_decimals: Optional[int] = None
    separator: str = " "


class EngineeringValue(Protocol):
    """Пара (mantissa, exponent) в engineering notation."""

    mantissa: float
    exponent: int


# =============================================================================
# FORMATTER
# =============================================================================


class HugeNumberFormatter:
    """Рендеринг пары (mantissa, exponent) через таблицу названий."""

    def __init__(self, config: FormatConfig | None = None):
        self.config = config or FormatConfig()

    def exp_name(self, exponent: int) -> str:
        return exp_name(exponent)

    def format_parts(self, mantissa: float, exponent: int) -> str:
        """
        Рендеринг сырой пары.

        Args:
            mantissa: Мантисса (ожидается нормализованная)
            exponent: Exponent

        Returns:
            "<mantissa><separator><name>" или голая мантисса

        Examples:
            >>> HugeNumberFormatter().format_parts(2.5, 9)
            '2.5 billion'
            >>> HugeNumberFormatter().format_parts(11.0, 0)
            '11.000'
        """
        name = self.exp_name(exponent)
        if not name:
            return f"{mantissa:.{self.config.bare_decimals}f}"
        return f"{self._format_named_mantissa(mantissa)}{self.config.separator}{name}"

    def format(self, number: EngineeringValue) -> str:
        return self.format_parts(number.mantissa, number.exponent)

    def _format_named_mantissa(self, mantissa: float) -> str:
        if self.config.named_decimals is not None:
            return f"{mantissa:.{self.config.named_decimals}f}"

        # Нормализованная мантисса < 1000, repr никогда не уходит в "e+NN"
        text = repr(float(mantissa))
        if text.endswith(".0"):
            text = text[:-2]
        return text


DEFAULT_FORMATTER = HugeNumberFormatter()
