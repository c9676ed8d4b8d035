"""Render — человекочитаемое представление чисел в engineering notation.

- Таблица английских названий степеней 10 (thousand ... decicentillion)
- Formatter "<mantissa> <name>" с конфигурируемой точностью
"""

from .formatter import (
    DEFAULT_FORMATTER,
    EngineeringValue,
    FormatConfig,
    HugeNumberFormatter,
)
from .names import MAX_NAMED_EXPONENT, POW_TEN_TO_NAME, exp_name

__all__ = [
    "DEFAULT_FORMATTER",
    "EngineeringValue",
    "FormatConfig",
    "HugeNumberFormatter",
    "MAX_NAMED_EXPONENT",
    "POW_TEN_TO_NAME",
    "exp_name",
]
