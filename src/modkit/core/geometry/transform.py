"""
AffineTransform — аффинное преобразование плоскости

Матрица в форме CoreGraphics:

    | a  b  0 |
    | c  d  0 |
    | tx ty 1 |

x' = a*x + c*y + tx,  y' = b*x + d*y + ty
"""

from pydantic import BaseModel

from modkit.core.geometry.point import Point


class AffineTransform(BaseModel):
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    model_config = {"frozen": True}

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def scale(cls, sx: float, sy: float) -> "AffineTransform":
        return cls(a=sx, d=sy)

    @classmethod
    def uniform_scale(cls, scale: float) -> "AffineTransform":
        """
        Examples:
            >>> AffineTransform.uniform_scale(2).apply(Point(x=1, y=3))
            Point(x=2.0, y=6.0)
        """
        return cls.scale(scale, scale)

    @property
    def is_identity(self) -> bool:
        return self == AffineTransform()

    def apply(self, point: Point) -> Point:
        return Point(
            x=self.a * point.x + self.c * point.y + self.tx,
            y=self.b * point.x + self.d * point.y + self.ty,
        )
