"""
Geometry — 2D value types

Point, Size, Rect, отступы, аффинные преобразования и контуры.
Все типы — immutable Pydantic модели.
"""

from modkit.core.geometry.insets import DirectionalEdgeInsets, EdgeInsets
from modkit.core.geometry.path import ClosePath, CurveTo, LineTo, MoveTo, Path, PathElement
from modkit.core.geometry.point import Point
from modkit.core.geometry.rect import Rect
from modkit.core.geometry.size import Size
from modkit.core.geometry.transform import AffineTransform

__all__ = [
    "AffineTransform",
    "ClosePath",
    "CurveTo",
    "DirectionalEdgeInsets",
    "EdgeInsets",
    "LineTo",
    "MoveTo",
    "Path",
    "PathElement",
    "Point",
    "Rect",
    "Size",
]
