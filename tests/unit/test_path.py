"""
Тесты для Path.rounded_rect
"""

import pytest

from modkit.core.geometry import ClosePath, CurveTo, LineTo, MoveTo, Path, Point, Rect, Size


@pytest.fixture
def rect() -> Rect:
    return Rect.make(0, 0, 100, 50)


class TestRoundedRect:
    """Тесты построения прямоугольника со скруглёнными углами"""

    def test_sharp_corners(self, rect: Rect) -> None:
        path = Path.rounded_rect(rect, 0, 0, 0, 0)
        assert path.elements == (
            MoveTo(point=Point(x=0, y=0)),
            LineTo(point=Point(x=100, y=0)),
            LineTo(point=Point(x=100, y=50)),
            LineTo(point=Point(x=0, y=50)),
            LineTo(point=Point(x=0, y=0)),
            ClosePath(),
        )
        assert path.is_closed

    def test_all_corners_rounded(self, rect: Rect) -> None:
        path = Path.rounded_rect(rect, 10, 10, 10, 10)
        kinds = [element.kind for element in path.elements]
        assert kinds == [
            "move", "curve", "line", "curve", "line", "curve", "line", "curve", "line", "close"
        ]

    def test_top_left_corner_geometry(self, rect: Rect) -> None:
        path = Path.rounded_rect(rect, 10, 0, 0, 0)
        assert path.elements[0] == MoveTo(point=Point(x=0, y=10))
        assert path.elements[1] == CurveTo(
            end=Point(x=10, y=0), control1=Point(x=0, y=0), control2=Point(x=10, y=0)
        )
        # Контур возвращается в стартовую точку
        assert path.elements[-2] == LineTo(point=Point(x=0, y=10))

    def test_elliptical_radius(self, rect: Rect) -> None:
        path = Path.rounded_rect(rect, 0, Size(width=20, height=5), 0, 0)
        assert path.elements[1] == LineTo(point=Point(x=80, y=0))
        assert path.elements[2] == CurveTo(
            end=Point(x=100, y=5), control1=Point(x=100, y=0), control2=Point(x=100, y=5)
        )
        assert path.elements[3] == LineTo(point=Point(x=100, y=50))

    def test_bottom_corners(self, rect: Rect) -> None:
        path = Path.rounded_rect(rect, 0, 0, bottom_left=4, bottom_right=6)
        lines = [e for e in path.elements if isinstance(e, LineTo)]
        curves = [e for e in path.elements if isinstance(e, CurveTo)]

        assert lines[1] == LineTo(point=Point(x=100, y=44))
        assert curves[0].end == Point(x=94, y=50)
        assert lines[2] == LineTo(point=Point(x=4, y=50))
        assert curves[1].end == Point(x=0, y=46)
        assert curves[1].control1 == Point(x=0, y=50)

    def test_current_point(self, rect: Rect) -> None:
        assert Path().current_point is None
        assert Path.rounded_rect(rect, 3, 3, 3, 3).current_point == Point(x=0, y=3)
