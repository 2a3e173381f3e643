"""
Rect — прямоугольник (origin + size)

Immutable Pydantic модель. Координаты — как в UIKit: ось Y направлена вниз,
"top" соответствует min_y, "bottom" — max_y.

Вместо присваивания якорных точек (rect.center = p) используются
builder-методы: rect.with_center(p) возвращает сдвинутую копию
с тем же размером.

          top_left ─── top ─── top_right
             │                    │
           left      center     right
             │                    │
        bottom_left ─ bottom ─ bottom_right
"""

from typing import Callable

from pydantic import BaseModel, Field

from modkit.core.geometry.point import Point
from modkit.core.geometry.size import Size


class Rect(BaseModel):
    """
    Прямоугольник.

    min/max вычисляются по стандартизованному прямоугольнику, width/height
    всегда неотрицательны (как у CGRect). top_left совпадает с origin,
    поэтому для отрицательного размера он не равен (min_x, min_y).

    Examples:
        >>> rect = Rect.make(0, 0, 100, 200)
        >>> rect.center
        Point(x=50.0, y=100.0)
        >>> rect.with_center(Point(x=0, y=0)).origin
        Point(x=-50.0, y=-100.0)
    """

    origin: Point = Field(default_factory=Point)
    size: Size = Field(default_factory=Size)

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def make(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(origin=Point(x=x, y=y), size=Size(width=width, height=height))

    @classmethod
    def from_center(cls, center: Point, size: Size) -> "Rect":
        origin = Point(x=center.x - size.width / 2.0, y=center.y - size.height / 2.0)
        return cls(origin=origin, size=size)

    @classmethod
    def from_size(cls, size: Size) -> "Rect":
        """Прямоугольник с нулевым origin."""
        return cls(origin=Point.ZERO, size=size)

    # -------------------------------------------------------------------------
    # Границы
    # -------------------------------------------------------------------------

    @property
    def width(self) -> float:
        return abs(self.size.width)

    @property
    def height(self) -> float:
        return abs(self.size.height)

    @property
    def min_x(self) -> float:
        return min(self.origin.x, self.origin.x + self.size.width)

    @property
    def mid_x(self) -> float:
        return self.min_x + self.width / 2.0

    @property
    def max_x(self) -> float:
        return max(self.origin.x, self.origin.x + self.size.width)

    @property
    def min_y(self) -> float:
        return min(self.origin.y, self.origin.y + self.size.height)

    @property
    def mid_y(self) -> float:
        return self.min_y + self.height / 2.0

    @property
    def max_y(self) -> float:
        return max(self.origin.y, self.origin.y + self.size.height)

    @property
    def area(self) -> float:
        """
        Examples:
            >>> Rect.make(0, 0, 15, 2).area
            30.0
        """
        return self.width * self.height

    # -------------------------------------------------------------------------
    # Якорные точки
    # -------------------------------------------------------------------------

    @property
    def top_left(self) -> Point:
        return self.origin

    @property
    def top(self) -> Point:
        return Point(x=self.mid_x, y=self.min_y)

    @property
    def top_right(self) -> Point:
        return Point(x=self.max_x, y=self.min_y)

    @property
    def left(self) -> Point:
        return Point(x=self.min_x, y=self.mid_y)

    @property
    def center(self) -> Point:
        return Point(x=self.mid_x, y=self.mid_y)

    @property
    def right(self) -> Point:
        return Point(x=self.max_x, y=self.mid_y)

    @property
    def bottom_left(self) -> Point:
        return Point(x=self.min_x, y=self.max_y)

    @property
    def bottom(self) -> Point:
        return Point(x=self.mid_x, y=self.max_y)

    @property
    def bottom_right(self) -> Point:
        return Point(x=self.max_x, y=self.max_y)

    def _moved(self, anchor: Point, point: Point) -> "Rect":
        """Сдвиг прямоугольника так, чтобы якорь anchor оказался в point."""
        origin = Point(
            x=self.origin.x + point.x - anchor.x,
            y=self.origin.y + point.y - anchor.y,
        )
        return Rect(origin=origin, size=self.size)

    def with_top_left(self, point: Point) -> "Rect":
        return self._moved(self.top_left, point)

    def with_top(self, point: Point) -> "Rect":
        return self._moved(self.top, point)

    def with_top_right(self, point: Point) -> "Rect":
        return self._moved(self.top_right, point)

    def with_left(self, point: Point) -> "Rect":
        return self._moved(self.left, point)

    def with_center(self, point: Point) -> "Rect":
        return self._moved(self.center, point)

    def with_right(self, point: Point) -> "Rect":
        return self._moved(self.right, point)

    def with_bottom_left(self, point: Point) -> "Rect":
        return self._moved(self.bottom_left, point)

    def with_bottom(self, point: Point) -> "Rect":
        return self._moved(self.bottom, point)

    def with_bottom_right(self, point: Point) -> "Rect":
        return self._moved(self.bottom_right, point)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def with_origin(self, new_origin: Point) -> "Rect":
        return Rect(origin=new_origin, size=self.size)

    def with_origin_updated(self, update: Callable[[Point], Point]) -> "Rect":
        return self.with_origin(update(self.origin))

    def with_size(self, new_size: Size) -> "Rect":
        return Rect(origin=self.origin, size=new_size)

    def with_size_updated(self, update: Callable[[Size], Size]) -> "Rect":
        return self.with_size(update(self.size))

    def with_width(self, new_width: float) -> "Rect":
        return self.with_size(self.size.with_width(new_width))

    def with_width_updated(self, update: Callable[[float], float]) -> "Rect":
        return self.with_width(update(self.width))

    def with_height(self, new_height: float) -> "Rect":
        return self.with_size(self.size.with_height(new_height))

    def with_height_updated(self, update: Callable[[float], float]) -> "Rect":
        return self.with_height(update(self.height))

    # -------------------------------------------------------------------------
    # Центрирование
    # -------------------------------------------------------------------------

    def centered_horizontally_in(self, container: "Rect") -> "Rect":
        """
        Копия, отцентрированная по горизонтали внутри container (y не меняется).

        Examples:
            >>> container = Rect.make(30, 60, 200, 100)
            >>> Rect.make(0, 0, 100, 50).centered_horizontally_in(container).origin
            Point(x=80.0, y=0.0)
        """
        new_x = container.min_x + (container.width - self.width) / 2.0
        return self.with_origin(self.origin.with_x(new_x))

    def centered_vertically_in(self, container: "Rect") -> "Rect":
        new_y = container.min_y + (container.height - self.height) / 2.0
        return self.with_origin(self.origin.with_y(new_y))

    def centered_in(self, container: "Rect") -> "Rect":
        return self.with_center(container.center)
