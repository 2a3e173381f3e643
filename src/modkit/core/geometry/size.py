"""
Size — 2D размер

Immutable Pydantic модель: размеры, соотношения сторон, масштабирование
с сохранением пропорций (fit/fill), арифметика и builder-методы.

Деление на нулевую сторону следует IEEE 754 (inf/nan), ZeroDivisionError
не бросается.
"""

import math
from typing import Callable, ClassVar, Union

from pydantic import BaseModel

from modkit.core.geometry.insets import DirectionalEdgeInsets, EdgeInsets


def _ieee_divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class Size(BaseModel):
    """
    Размер (ширина и высота).

    Examples:
        >>> Size(width=100, height=50).scaled_to_fit(Size.square(80))
        Size(width=80.0, height=40.0)
    """

    width: float = 0.0
    height: float = 0.0

    model_config = {"frozen": True}

    ZERO: ClassVar["Size"]

    @classmethod
    def square(cls, dimension: float) -> "Size":
        return cls(width=dimension, height=dimension)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def max_dimension(self) -> float:
        return max(self.width, self.height)

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)

    @property
    def width_to_height_ratio(self) -> float:
        """
        Examples:
            >>> Size(width=200, height=100).width_to_height_ratio
            2.0
        """
        return _ieee_divide(self.width, self.height)

    @property
    def height_to_width_ratio(self) -> float:
        return _ieee_divide(self.height, self.width)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "Size") -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(width=self.width + other.width, height=self.height + other.height)

    def __sub__(self, other: "Size") -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(width=self.width - other.width, height=self.height - other.height)

    def __mul__(self, other: Union["Size", float]) -> "Size":
        # Size * Size — покомпонентное произведение
        if isinstance(other, Size):
            return Size(width=self.width * other.width, height=self.height * other.height)
        if isinstance(other, (int, float)):
            return self.scaled(other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Size":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.scaled(scalar)

    # -------------------------------------------------------------------------
    # Масштабирование
    # -------------------------------------------------------------------------

    def scaled(self, scale: float) -> "Size":
        return Size(width=self.width * scale, height=self.height * scale)

    def scaled_to_fit(self, bounding: "Size") -> "Size":
        """
        Масштабирование с сохранением пропорций, чтобы поместиться в bounding.

        Результат не превышает bounding ни по одной стороне; совпадающая
        сторона берётся из bounding без пересчёта (без погрешности 99.999...).
        """
        width_ratio = _ieee_divide(bounding.width, self.width)
        height_ratio = _ieee_divide(bounding.height, self.height)

        if width_ratio < height_ratio:
            return Size(width=bounding.width, height=self.height * width_ratio)
        if height_ratio < width_ratio:
            return Size(width=self.width * height_ratio, height=bounding.height)
        return bounding

    def scaled_to_fill(self, bounding: "Size") -> "Size":
        """
        Масштабирование с сохранением пропорций, чтобы полностью покрыть bounding.

        Examples:
            >>> Size(width=100, height=50).scaled_to_fill(Size.square(80))
            Size(width=160.0, height=80.0)
        """
        width_ratio = _ieee_divide(bounding.width, self.width)
        height_ratio = _ieee_divide(bounding.height, self.height)

        if width_ratio > height_ratio:
            return Size(width=bounding.width, height=self.height * width_ratio)
        if height_ratio > width_ratio:
            return Size(width=self.width * height_ratio, height=bounding.height)
        return bounding

    def fits(self, container: "Size") -> bool:
        return self.width <= container.width and self.height <= container.height

    def clamped(self, container: "Size") -> "Size":
        """Размер, не превышающий container ни по одной стороне."""
        return Size(
            width=min(self.width, container.width),
            height=min(self.height, container.height),
        )

    def inset_by(self, insets: Union[EdgeInsets, DirectionalEdgeInsets]) -> "Size":
        """
        Examples:
            >>> Size(width=100, height=50).inset_by(EdgeInsets.symmetric(8, 16))
            Size(width=68.0, height=34.0)
        """
        return Size(width=self.width - insets.horizontal, height=self.height - insets.vertical)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def with_width(self, new_width: float) -> "Size":
        return Size(width=new_width, height=self.height)

    def with_width_updated(self, update: Callable[[float], float]) -> "Size":
        return self.with_width(update(self.width))

    def with_height(self, new_height: float) -> "Size":
        return Size(width=self.width, height=new_height)

    def with_height_updated(self, update: Callable[[float], float]) -> "Size":
        return self.with_height(update(self.height))


Size.ZERO = Size()
