"""
EdgeInsets — отступы по четырём сторонам

EdgeInsets использует left/right, DirectionalEdgeInsets — leading/trailing.
"""

from pydantic import BaseModel


class EdgeInsets(BaseModel):
    """
    Examples:
        >>> EdgeInsets.symmetric(top_and_bottom=16, left_and_right=8).horizontal
        16.0
    """

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    model_config = {"frozen": True}

    @classmethod
    def symmetric(cls, top_and_bottom: float, left_and_right: float) -> "EdgeInsets":
        return cls(
            top=top_and_bottom, left=left_and_right, bottom=top_and_bottom, right=left_and_right
        )

    @classmethod
    def uniform(cls, inset: float) -> "EdgeInsets":
        return cls(top=inset, left=inset, bottom=inset, right=inset)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def __neg__(self) -> "EdgeInsets":
        return EdgeInsets(top=-self.top, left=-self.left, bottom=-self.bottom, right=-self.right)


class DirectionalEdgeInsets(BaseModel):
    """Отступы с учётом направления письма (leading/trailing)."""

    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0

    model_config = {"frozen": True}

    @classmethod
    def symmetric(cls, vertical: float, horizontal: float) -> "DirectionalEdgeInsets":
        return cls(top=vertical, leading=horizontal, bottom=vertical, trailing=horizontal)

    @classmethod
    def uniform(cls, inset: float) -> "DirectionalEdgeInsets":
        return cls(top=inset, leading=inset, bottom=inset, trailing=inset)

    @property
    def horizontal(self) -> float:
        return self.leading + self.trailing

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def __neg__(self) -> "DirectionalEdgeInsets":
        return DirectionalEdgeInsets(
            top=-self.top, leading=-self.leading, bottom=-self.bottom, trailing=-self.trailing
        )
