"""
Engineering Notation — нормализация и выравнивание (mantissa, exponent)

Модуль содержит чистые функции, поддерживающие каноническую форму
engineering notation для пары (mantissa, exponent):
- Нормализация после любой сырой мутации (переполнение, underflow, остаток exponent)
- Выравнивание операнда с меньшим exponent к масштабу большего перед сложением

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После normalize: либо (mantissa == 0 и exponent == 0),
   либо (1 <= |mantissa| < 1000 и exponent % 3 == 0)
2. normalize идемпотентна и тотальна для всех конечных float
3. Знак хранится только в mantissa, exponent относится к модулю
4. Операнд, отстоящий больше чем на MAX_MAGNITUDE порядков, обнуляется при align
"""

import logging
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ENGINEERING NOTATION
# =============================================================================

# Максимальная разница порядков между операндами сложения/вычитания.
# Double хранит ~15-17 значащих цифр, поэтому операнд, меньший в 10^12+ раз,
# не вносит значимого вклада в сумму.
MAX_MAGNITUDE: Final[int] = 12

# Шаг мантиссы между соседними именованными порядками
TEN_CUBED: Final[float] = 1e3

# Шаг exponent в engineering notation
EXPONENT_STEP: Final[int] = 3


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def _scale_into_range(magnitude: float, exponent: int) -> tuple[float, int]:
    """Перенос положительной мантиссы в [1, 1000) шагами по 10^3."""
    while magnitude >= TEN_CUBED:
        magnitude /= TEN_CUBED
        exponent += EXPONENT_STEP
    while magnitude < 1:
        magnitude *= TEN_CUBED
        exponent -= EXPONENT_STEP
    return magnitude, exponent


def normalize(mantissa: float, exponent: int) -> tuple[float, int]:
    """
    Приведение пары (mantissa, exponent) к канонической engineering форме.

    Алгоритм:
        1. mantissa == 0 (включая -0.0) → каноничный ноль (0.0, 0)
        2. Знак отделяется, дальше работаем с |mantissa|
        3. |mantissa| переносится в [1, 1000) шагами по 10^3
        4. Остаток r = exponent mod 3 (всегда >= 0) переносится в мантиссу:
           mantissa *= 10^r, exponent -= r
        5. Шаг 4 может вывести мантиссу за 1000 (до 10^5) → повторяем шаг 3
        6. Знак восстанавливается

    Шаг 3 выполняется до шага 4, чтобы умножение на 10^r не переполнило
    мантиссу около float max.

    Args:
        mantissa: Конечное float значение (любой знак, любой порядок)
        exponent: Целый exponent (не обязательно кратный 3)

    Returns:
        (mantissa, exponent) в канонической форме

    Examples:
        >>> normalize(1000.0, 2)
        (100.0, 3)
        >>> normalize(-1000.0, 11)
        (-100.0, 12)
        >>> normalize(0.5, 0)
        (500.0, -3)
        >>> normalize(-0.0, 42)
        (0.0, 0)
    """
    if mantissa == 0:
        return 0.0, 0

    sign = -1.0 if mantissa < 0 else 1.0
    magnitude, exponent = _scale_into_range(abs(mantissa), exponent)

    remainder = exponent % EXPONENT_STEP
    if remainder:
        magnitude *= 10**remainder
        exponent -= remainder
        magnitude, exponent = _scale_into_range(magnitude, exponent)

    return sign * magnitude, exponent


def is_normalized(mantissa: float, exponent: int) -> bool:
    """
    Проверка канонической формы без её изменения.

    Returns:
        True если пара удовлетворяет инварианту нормализации
    """
    if mantissa == 0:
        return exponent == 0
    return 1 <= abs(mantissa) < TEN_CUBED and exponent % EXPONENT_STEP == 0


# =============================================================================
# ВЫРАВНИВАНИЕ
# =============================================================================


def align(mantissa: float, exponent: int, target_exponent: int) -> tuple[float, int]:
    """
    Пересчёт пары к большему exponent для прямого сложения мантисс.

    d = target_exponent - exponent:
    - d <= 0: пара возвращается без изменений (предусловие не выполнено)
    - 0 < d <= MAX_MAGNITUDE: mantissa / 10^d, exponent = target_exponent
    - d > MAX_MAGNITUDE: операнд пренебрежимо мал → mantissa = 0,
      exponent = target_exponent

    ВАЖНО: результат не нормализован (|mantissa| может быть < 1).
    Это транзитная форма, которую сразу потребляет сложение/вычитание.

    Args:
        mantissa: Мантисса операнда с меньшим exponent
        exponent: Его exponent
        target_exponent: Exponent второго операнда

    Returns:
        (mantissa, exponent) в масштабе target_exponent

    Examples:
        >>> align(1.0, 0, 3)
        (0.001, 3)
        >>> align(5.0, 0, 15)
        (0.0, 15)
        >>> align(5.0, 6, 3)
        (5.0, 6)
    """
    delta = target_exponent - exponent
    if delta <= 0:
        return mantissa, exponent

    if delta <= MAX_MAGNITUDE:
        return mantissa / 10.0**delta, target_exponent

    if mantissa != 0:
        logger.debug(
            "Operand %r e%d vanishes when aligned to e%d (spread %d > %d)",
            mantissa,
            exponent,
            target_exponent,
            delta,
            MAX_MAGNITUDE,
        )
    return 0.0, target_exponent
