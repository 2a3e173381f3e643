"""
Integers — Хелперы для целых чисел

- Разложение на десятичные цифры
- Чётность
- Принадлежность диапазону и clamp (через модели диапазонов)
- Конверсии int -> float / str
"""

from modkit.core.domain.ranges import clamped, is_in_range

__all__ = [
    "clamped",
    "digits",
    "is_even",
    "is_in_range",
    "is_odd",
    "to_double",
    "to_string",
]


def digits(value: int) -> list[int]:
    """
    Десятичные цифры абсолютного значения.

    Examples:
        >>> digits(-312)
        [3, 1, 2]
        >>> digits(0)
        [0]
    """
    return [int(char) for char in str(abs(int(value)))]


def is_even(value: int) -> bool:
    return value % 2 == 0


def is_odd(value: int) -> bool:
    return value % 2 != 0


def to_double(value: int) -> float:
    """
    Examples:
        >>> to_double(49)
        49.0
    """
    return float(value)


def to_string(value: int) -> str:
    return str(int(value))
