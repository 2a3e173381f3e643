"""
Floats — Хелперы для чисел с плавающей точкой

Модуль обеспечивает:
- Конверсию градусы <-> радианы
- Разложение на цифры по кратчайшему десятичному представлению
- Округление до N знаков с выбираемым правилом округления
- ceil/floor, возвращающие float
- Конверсию времени между единицами измерения

ИНВАРИАНТЫ:
1. Округление выполняется над десятичным представлением (repr), а не над
   двоичным значением: rounded(2.675, 2) == 2.68
2. NaN/Inf возвращаются из rounded без изменений
"""

import math
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
    localcontext,
)
from enum import Enum, IntEnum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class RoundingRule(str, Enum):
    """Правило округления"""

    UP = "up"  # к +inf
    DOWN = "down"  # к -inf
    TOWARD_ZERO = "toward_zero"
    AWAY_FROM_ZERO = "away_from_zero"
    TO_NEAREST_OR_EVEN = "to_nearest_or_even"  # банковское
    TO_NEAREST_OR_AWAY_FROM_ZERO = "to_nearest_or_away_from_zero"  # школьное


class TimeUnit(IntEnum):
    """
    Единицы времени в порядке возрастания.

    Порядок важен: коэффициенты перехода между соседними единицами
    лежат в TIME_UNIT_FACTORS.
    """

    NANOSECONDS = 0
    MILLISECONDS = 1
    SECONDS = 2
    MINUTES = 3
    HOURS = 4
    DAYS = 5
    YEARS = 6


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

_DECIMAL_ROUNDING: Final[dict[RoundingRule, str]] = {
    RoundingRule.UP: ROUND_CEILING,
    RoundingRule.DOWN: ROUND_FLOOR,
    RoundingRule.TOWARD_ZERO: ROUND_DOWN,
    RoundingRule.AWAY_FROM_ZERO: ROUND_UP,
    RoundingRule.TO_NEAREST_OR_EVEN: ROUND_HALF_EVEN,
    RoundingRule.TO_NEAREST_OR_AWAY_FROM_ZERO: ROUND_HALF_UP,
}

# Дальше этого знака float уже не содержит значащих цифр (5e-324)
MAX_SIGNIFICANT_PLACES: Final[int] = 340

# Коэффициенты между соседними единицами TimeUnit (шкала без микросекунд)
TIME_UNIT_FACTORS: Final[tuple[float, ...]] = (1_000_000.0, 1000.0, 60.0, 60.0, 24.0, 365.0)


# =============================================================================
# УГЛЫ
# =============================================================================


def degrees_to_radians(degrees: float) -> float:
    """
    Examples:
        >>> round(degrees_to_radians(120.0), 3)
        2.094
    """
    return degrees * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    """
    Examples:
        >>> round(radians_to_degrees(2.0), 1)
        114.6
    """
    return radians * 180 / math.pi


# =============================================================================
# ЦИФРЫ И КОНВЕРСИИ
# =============================================================================


def digits(value: float) -> list[int]:
    """
    Цифры абсолютного значения в кратчайшем десятичном представлении.

    Все нецифровые символы (точка, экспонента, знак) отбрасываются.

    Examples:
        >>> digits(-312.55)
        [3, 1, 2, 5, 5]
        >>> digits(0.0)
        [0]
    """
    if value == 0:
        # repr(0.0) == "0.0" дал бы [0, 0]
        return [0]
    return [int(char) for char in repr(abs(float(value))) if char.isdigit()]


def digit_count(value: float) -> int:
    """
    Количество цифр значения.

    Examples:
        >>> digit_count(-592.4)
        4
    """
    return len(digits(value))


def to_int(value: float) -> int:
    """Отбрасывание дробной части (к нулю): to_int(-34.56) == -34."""
    return int(value)


def ceil(value: float) -> float:
    """Наименьшее целое >= value, как float."""
    return float(math.ceil(value)) if math.isfinite(value) else value


def floor(value: float) -> float:
    """Наибольшее целое <= value, как float."""
    return float(math.floor(value)) if math.isfinite(value) else value


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def rounded(
    value: float,
    places: int = 0,
    rule: RoundingRule = RoundingRule.TO_NEAREST_OR_AWAY_FROM_ZERO,
) -> float:
    """
    Округление до places знаков после запятой по заданному правилу.

    Args:
        value: Исходное значение
        places: Количество знаков после запятой (отрицательное — до десятков, сотен, ...)
        rule: Правило округления

    Returns:
        Округлённое значение (float)

    Examples:
        >>> rounded(2.675, 2)
        2.68
        >>> rounded(2.5, rule=RoundingRule.TO_NEAREST_OR_EVEN)
        2.0
        >>> rounded(-1.21, 1, RoundingRule.UP)
        -1.2
        >>> rounded(1250.0, -2)
        1300.0
    """
    if not math.isfinite(value):
        return value
    if places >= MAX_SIGNIFICANT_PLACES:
        return float(value)

    with localcontext() as ctx:
        # Хватает на 309 целых цифр плюс MAX_SIGNIFICANT_PLACES дробных
        ctx.prec = 700
        quantum = Decimal(1).scaleb(-places)
        result = Decimal(repr(float(value))).quantize(quantum, rounding=_DECIMAL_ROUNDING[rule])
    return float(result)


# =============================================================================
# ВРЕМЯ
# =============================================================================


def converted_time(value: float, start: TimeUnit, end: TimeUnit) -> float:
    """
    Конверсия длительности из одной единицы времени в другую.

    Examples:
        >>> converted_time(1.5, TimeUnit.DAYS, TimeUnit.MINUTES)
        2160.0
        >>> round(converted_time(10000, TimeUnit.SECONDS, TimeUnit.HOURS), 4)
        2.7778
    """
    low, high = min(start, end), max(start, end)
    result = float(value)
    for factor in TIME_UNIT_FACTORS[low:high]:
        # Из крупной единицы в мелкую — умножаем, иначе делим
        result = result * factor if start > end else result / factor
    return result
