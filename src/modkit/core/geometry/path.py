"""
Path — векторный контур из элементов MoveTo / LineTo / CurveTo / ClosePath

Главное назначение — построение прямоугольника с независимыми радиусами
скругления углов (Path.rounded_rect). Рендеринг не входит в задачу модуля:
Path только описывает геометрию.
"""

from typing import Literal, Union

from pydantic import BaseModel

from modkit.core.geometry.point import Point
from modkit.core.geometry.rect import Rect
from modkit.core.geometry.size import Size

Radius = Union[Size, float]


# =============================================================================
# ЭЛЕМЕНТЫ КОНТУРА
# =============================================================================


class MoveTo(BaseModel):
    kind: Literal["move"] = "move"
    point: Point

    model_config = {"frozen": True}


class LineTo(BaseModel):
    kind: Literal["line"] = "line"
    point: Point

    model_config = {"frozen": True}


class CurveTo(BaseModel):
    """Кубическая кривая Безье в точку end."""

    kind: Literal["curve"] = "curve"
    end: Point
    control1: Point
    control2: Point

    model_config = {"frozen": True}


class ClosePath(BaseModel):
    kind: Literal["close"] = "close"

    model_config = {"frozen": True}


PathElement = Union[MoveTo, LineTo, CurveTo, ClosePath]


# =============================================================================
# PATH
# =============================================================================


def _as_size(radius: Radius) -> Size:
    if isinstance(radius, Size):
        return radius
    return Size.square(radius)


class Path(BaseModel):
    """
    Контур как последовательность элементов.

    Examples:
        >>> path = Path.rounded_rect(Rect.make(0, 0, 100, 50), 0, 0, 0, 0)
        >>> [element.kind for element in path.elements]
        ['move', 'line', 'line', 'line', 'line', 'close']
    """

    elements: tuple[PathElement, ...] = ()

    model_config = {"frozen": True}

    @property
    def is_closed(self) -> bool:
        return bool(self.elements) and isinstance(self.elements[-1], ClosePath)

    @property
    def current_point(self) -> Point | None:
        """Конечная точка последнего элемента с координатами."""
        for element in reversed(self.elements):
            if isinstance(element, (MoveTo, LineTo)):
                return element.point
            if isinstance(element, CurveTo):
                return element.end
        return None

    @classmethod
    def rounded_rect(
        cls,
        rect: Rect,
        top_left: Radius,
        top_right: Radius,
        bottom_left: Radius,
        bottom_right: Radius,
    ) -> "Path":
        """
        Прямоугольник с независимыми радиусами скругления углов.

        Обход по часовой стрелке (в координатах с осью Y вниз), начиная
        с левой стороны под верхним левым углом:

            1 ───── 2
            │       │
            4 ───── 3

        Каждый ненулевой угол — кубическая кривая, у которой первая
        контрольная точка совпадает с вершиной угла, а вторая — с концом
        кривой. Нулевой радиус даёт острый угол без кривой.

        Args:
            rect: Базовый прямоугольник
            top_left: Радиус угла 1 (число или Size)
            top_right: Радиус угла 2
            bottom_left: Радиус угла 4
            bottom_right: Радиус угла 3

        Returns:
            Замкнутый Path
        """
        radius1 = _as_size(top_left)
        radius2 = _as_size(top_right)
        radius3 = _as_size(bottom_right)
        radius4 = _as_size(bottom_left)

        point1 = rect.top_left
        point2 = rect.top_right
        point3 = rect.bottom_right
        point4 = rect.bottom_left

        start = point1.with_y_offset(radius1.height)
        elements: list[PathElement] = [MoveTo(point=start)]

        if radius1 != Size.ZERO:
            end = point1.with_x_offset(radius1.width)
            elements.append(CurveTo(end=end, control1=point1, control2=end))

        elements.append(LineTo(point=point2.with_x_offset(-radius2.width)))
        if radius2 != Size.ZERO:
            end = point2.with_y_offset(radius2.height)
            elements.append(CurveTo(end=end, control1=point2, control2=end))

        elements.append(LineTo(point=point3.with_y_offset(-radius3.height)))
        if radius3 != Size.ZERO:
            end = point3.with_x_offset(-radius3.width)
            elements.append(CurveTo(end=end, control1=point3, control2=end))

        elements.append(LineTo(point=point4.with_x_offset(radius4.width)))
        if radius4 != Size.ZERO:
            end = point4.with_y_offset(-radius4.height)
            elements.append(CurveTo(end=end, control1=point4, control2=end))

        elements.append(LineTo(point=start))
        elements.append(ClosePath())
        return cls(elements=tuple(elements))
