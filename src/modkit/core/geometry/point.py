"""
Point — 2D точка

Immutable Pydantic модель с арифметикой (+, -, скалярное *),
расстоянием и builder-методами with_x / with_y.
"""

import math
from typing import Callable, ClassVar

from pydantic import BaseModel


class Point(BaseModel):
    """
    Точка на плоскости.

    Examples:
        >>> Point(x=1, y=2) + Point(x=3, y=4)
        Point(x=4.0, y=6.0)
        >>> 2 * Point(x=1, y=2)
        Point(x=2.0, y=4.0)
    """

    x: float = 0.0
    y: float = 0.0

    model_config = {"frozen": True}

    ZERO: ClassVar["Point"]

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, scalar: float) -> "Point":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Point(x=self.x * scalar, y=self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Point":
        return Point(x=-self.x, y=-self.y)

    # -------------------------------------------------------------------------
    # Расстояние
    # -------------------------------------------------------------------------

    @staticmethod
    def distance(point1: "Point", point2: "Point") -> float:
        return math.hypot(point2.x - point1.x, point2.y - point1.y)

    def distance_to(self, other: "Point") -> float:
        """
        Examples:
            >>> Point(x=0, y=0).distance_to(Point(x=3, y=4))
            5.0
        """
        return Point.distance(self, other)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def offset_by(self, dx: float, dy: float) -> "Point":
        return Point(x=self.x + dx, y=self.y + dy)

    def offset_by_angle(self, angle: float, radius: float) -> "Point":
        """
        Смещение по окружности радиуса radius с центром в этой точке.

        Угол в радианах, отсчёт в обычной системе координат (ось Y вверх).

        Examples:
            >>> p = Point(x=100, y=50).offset_by_angle(math.pi / 2, 25)
            >>> (round(p.x, 6), round(p.y, 6))
            (100.0, 75.0)
        """
        return self.offset_by(radius * math.cos(angle), radius * math.sin(angle))

    def with_x(self, new_x: float) -> "Point":
        return Point(x=new_x, y=self.y)

    def with_x_updated(self, update: Callable[[float], float]) -> "Point":
        return self.with_x(update(self.x))

    def with_x_offset(self, dx: float) -> "Point":
        return self.with_x(self.x + dx)

    def with_y(self, new_y: float) -> "Point":
        return Point(x=self.x, y=new_y)

    def with_y_updated(self, update: Callable[[float], float]) -> "Point":
        return self.with_y(update(self.y))

    def with_y_offset(self, dy: float) -> "Point":
        return self.with_y(self.y + dy)


Point.ZERO = Point()
