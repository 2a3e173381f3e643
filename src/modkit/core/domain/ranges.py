"""
Ranges — Модели диапазонов

Immutable Pydantic модели для закрытых, полуоткрытых и частичных диапазонов.
Используются для проверки принадлежности, clamp'а и проверки вложенности.

Python `range` с шагом 1 принимается везде, где ожидается HalfOpenRange.

ИНВАРИАНТЫ:
1. lower <= upper для ClosedRange и HalfOpenRange (иначе ValidationError)
2. clamped(v, r) всегда лежит внутри r
3. clamped(v, r) == v, если v уже внутри r
"""

from numbers import Integral
from typing import Any, Union

from pydantic import BaseModel, Field, model_validator

Bound = Union[int, float]


# =============================================================================
# ЗАКРЫТЫЙ И ПОЛУОТКРЫТЫЙ ДИАПАЗОНЫ
# =============================================================================


class ClosedRange(BaseModel):
    """
    Закрытый диапазон [lower, upper].

    Examples:
        >>> ClosedRange(lower=5, upper=8).clamp(9)
        8
    """

    lower: Bound = Field(..., description="Нижняя граница (включительно)")
    upper: Bound = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "ClosedRange":
        """Проверка порядка границ"""
        if self.lower > self.upper:
            raise ValueError(
                f"lower must be <= upper, got lower={self.lower}, upper={self.upper}"
            )
        return self

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def contains(self, value: Any) -> bool:
        return self.lower <= value <= self.upper

    def clamp(self, value: Any) -> Any:
        if value > self.upper:
            return self.upper
        if value < self.lower:
            return self.lower
        return value

    def is_subrange_of(self, other: Any) -> bool:
        """
        Проверка вложенности в другой диапазон.

        Examples:
            >>> ClosedRange(lower=5, upper=8).is_subrange_of(HalfOpenRange(lower=3, upper=9))
            True
            >>> ClosedRange(lower=5, upper=8).is_subrange_of(PartialRangeThrough(upper=7))
            False
        """
        other = as_range(other)
        if isinstance(other, HalfOpenRange):
            return other.lower <= self.lower and self.upper < other.upper
        if isinstance(other, ClosedRange):
            return other.lower <= self.lower and self.upper <= other.upper
        if isinstance(other, PartialRangeFrom):
            return other.lower <= self.lower
        if isinstance(other, PartialRangeThrough):
            return self.upper <= other.upper
        raise TypeError(f"ClosedRange cannot be compared with {type(other).__name__}")


class HalfOpenRange(BaseModel):
    """
    Полуоткрытый диапазон [lower, upper).

    Пустой диапазон (lower == upper) допустим, но его нельзя использовать для clamp.
    """

    lower: Bound = Field(..., description="Нижняя граница (включительно)")
    upper: Bound = Field(..., description="Верхняя граница (не включительно)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "HalfOpenRange":
        """Проверка порядка границ"""
        if self.lower > self.upper:
            raise ValueError(
                f"lower must be <= upper, got lower={self.lower}, upper={self.upper}"
            )
        return self

    @property
    def is_empty(self) -> bool:
        return self.lower == self.upper

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def contains(self, value: Any) -> bool:
        return self.lower <= value < self.upper

    def clamp(self, value: Any) -> Any:
        """
        Clamp целого значения в [lower, upper - 1].

        Raises:
            TypeError: Если значение или границы не целые
            ValueError: Если диапазон пуст

        Examples:
            >>> r = HalfOpenRange(lower=3, upper=8)
            >>> [r.clamp(v) for v in (2, 5, 8)]
            [3, 5, 7]
        """
        if not all(isinstance(v, Integral) for v in (value, self.lower, self.upper)):
            raise TypeError("half-open clamping requires integral values")
        if self.is_empty:
            raise ValueError(f"cannot clamp to an empty range [{self.lower}, {self.upper})")

        if value < self.lower:
            return self.lower
        if value >= self.upper:
            return self.upper - 1
        return value

    def is_subrange_of(self, other: Any) -> bool:
        other = as_range(other)
        if isinstance(other, HalfOpenRange):
            return other.lower <= self.lower and self.upper <= other.upper
        if isinstance(other, PartialRangeFrom):
            return other.lower <= self.lower
        raise TypeError(f"HalfOpenRange cannot be compared with {type(other).__name__}")


# =============================================================================
# ЧАСТИЧНЫЕ ДИАПАЗОНЫ
# =============================================================================


class PartialRangeFrom(BaseModel):
    """Диапазон [lower, +inf)."""

    lower: Bound

    model_config = {"frozen": True}

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def contains(self, value: Any) -> bool:
        return self.lower <= value

    def clamp(self, value: Any) -> Any:
        return self.lower if value < self.lower else value

    def is_subrange_of(self, other: Any) -> bool:
        other = as_range(other)
        if isinstance(other, PartialRangeFrom):
            return other.lower <= self.lower
        raise TypeError(f"PartialRangeFrom cannot be compared with {type(other).__name__}")


class PartialRangeThrough(BaseModel):
    """Диапазон (-inf, upper]."""

    upper: Bound

    model_config = {"frozen": True}

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def contains(self, value: Any) -> bool:
        return value <= self.upper

    def clamp(self, value: Any) -> Any:
        return self.upper if value > self.upper else value

    def is_subrange_of(self, other: Any) -> bool:
        other = as_range(other)
        if isinstance(other, PartialRangeThrough):
            return self.upper <= other.upper
        raise TypeError(
            f"PartialRangeThrough cannot be compared with {type(other).__name__}"
        )


class PartialRangeUpTo(BaseModel):
    """Диапазон (-inf, upper). Используется в основном для срезов строк."""

    upper: Bound

    model_config = {"frozen": True}

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def contains(self, value: Any) -> bool:
        return value < self.upper

    def clamp(self, value: Any) -> Any:
        if not isinstance(value, Integral) or not isinstance(self.upper, Integral):
            raise TypeError("up-to clamping requires integral values")
        return self.upper - 1 if value >= self.upper else value


AnyRange = Union[
    ClosedRange, HalfOpenRange, PartialRangeFrom, PartialRangeThrough, PartialRangeUpTo
]


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def as_range(limits: Any) -> AnyRange:
    """
    Нормализация Python `range` в HalfOpenRange.

    Модели диапазонов возвращаются как есть.

    Raises:
        ValueError: Если у range шаг != 1
        TypeError: Если limits не диапазон
    """
    if isinstance(limits, range):
        if limits.step != 1:
            raise ValueError(f"only ranges with step 1 are supported, got step {limits.step}")
        return HalfOpenRange(lower=limits.start, upper=max(limits.start, limits.stop))
    if isinstance(
        limits,
        (ClosedRange, HalfOpenRange, PartialRangeFrom, PartialRangeThrough, PartialRangeUpTo),
    ):
        return limits
    raise TypeError(f"expected a range, got {type(limits).__name__}")


def clamped(value: Any, limits: Any) -> Any:
    """
    Clamp значения в заданный диапазон.

    Args:
        value: Исходное значение
        limits: Модель диапазона или Python range

    Returns:
        Значение, ограниченное диапазоном

    Examples:
        >>> clamped(2, range(3, 8))
        3
        >>> clamped(9.3, ClosedRange(lower=5.5, upper=8.9))
        8.9
        >>> clamped(3, PartialRangeFrom(lower=5))
        5
    """
    return as_range(limits).clamp(value)


def is_in_range(value: Any, limits: Any) -> bool:
    """
    Проверка принадлежности значения диапазону.

    Examples:
        >>> is_in_range(19, range(5, 99))
        True
    """
    return as_range(limits).contains(value)


def is_subrange(inner: Any, outer: Any) -> bool:
    """Проверка, что inner вложен в outer (см. is_subrange_of у моделей)."""
    return as_range(inner).is_subrange_of(outer)
