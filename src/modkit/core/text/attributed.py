"""
AttributedString — Модель строки с атрибутами

Immutable Pydantic модель: текст плюс упорядоченный список "runs"
(диапазон символов + словарь атрибутов). Атрибуты поздних runs
перекрывают атрибуты ранних на пересечении.

Сама модель ничего не рендерит: это контейнер данных для UI-слоя.
"""

from enum import Enum, IntEnum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field

from modkit.core.domain.ranges import HalfOpenRange, as_range
from modkit.core.geometry.size import Size


# =============================================================================
# ENUMS
# =============================================================================


class AttributeKey(str, Enum):
    """Системные ключи атрибутов"""

    FONT = "font"
    FOREGROUND_COLOR = "foreground_color"
    BACKGROUND_COLOR = "background_color"
    UNDERLINE_STYLE = "underline_style"
    UNDERLINE_COLOR = "underline_color"
    STRIKETHROUGH_STYLE = "strikethrough_style"
    STRIKETHROUGH_COLOR = "strikethrough_color"
    SHADOW = "shadow"


class UnderlineStyle(IntEnum):
    """Стиль подчёркивания (значения совместимы с битовой маской платформы)"""

    NONE = 0x00
    SINGLE = 0x01
    THICK = 0x02
    DOUBLE = 0x09


# =============================================================================
# NESTED MODELS
# =============================================================================


class Shadow(BaseModel):
    """Тень текста."""

    offset: Size = Field(default_factory=lambda: Size(width=0.0, height=-3.0))
    blur_radius: float = Field(0.0, ge=0)
    color: Optional[Any] = Field(None, description="Цвет тени (None — цвет по умолчанию)")

    model_config = {"frozen": True}


class AttributeRun(BaseModel):
    """Набор атрибутов, применённый к диапазону [start, start + length)."""

    start: int = Field(..., ge=0)
    length: int = Field(..., ge=0)
    attributes: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def end(self) -> int:
        return self.start + self.length

    def covers(self, index: int) -> bool:
        return self.start <= index < self.end


# =============================================================================
# ATTRIBUTED STRING
# =============================================================================


RangeLike = Union[HalfOpenRange, range]


class AttributedString(BaseModel):
    """
    Строка с атрибутами по диапазонам символов.

    Examples:
        >>> s = AttributedString(text="Hello").applying({AttributeKey.FONT: "title3"})
        >>> s.attributes_at(0)[AttributeKey.FONT]
        'title3'
    """

    text: str = ""
    runs: tuple[AttributeRun, ...] = ()

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.text)

    def _resolve_range(self, in_range: Optional[RangeLike]) -> HalfOpenRange:
        if in_range is None:
            return HalfOpenRange(lower=0, upper=len(self.text))

        bounds = as_range(in_range)
        if not isinstance(bounds, HalfOpenRange):
            raise TypeError(f"expected a half-open range, got {type(bounds).__name__}")
        if bounds.lower < 0 or bounds.upper > len(self.text):
            raise IndexError(
                f"range [{bounds.lower}, {bounds.upper}) out of bounds for length {len(self.text)}"
            )
        return bounds

    def applying(
        self,
        attributes: Mapping[str, Any],
        in_range: Optional[RangeLike] = None,
    ) -> "AttributedString":
        """
        Новая строка с атрибутами, применёнными к диапазону символов.

        Args:
            attributes: Словарь атрибутов (AttributeKey или собственные ключи)
            in_range: Диапазон символов; None — вся строка

        Returns:
            Новая AttributedString; для пустого текста возвращается self

        Raises:
            IndexError: Если диапазон выходит за пределы текста
        """
        if not self.text:
            return self

        bounds = self._resolve_range(in_range)
        run = AttributeRun(
            start=bounds.lower,
            length=bounds.upper - bounds.lower,
            attributes=dict(attributes),
        )
        return self.model_copy(update={"runs": self.runs + (run,)})

    def applying_underline(
        self,
        style: UnderlineStyle,
        color: Any,
        in_range: Optional[RangeLike] = None,
    ) -> "AttributedString":
        return self.applying(
            {AttributeKey.UNDERLINE_COLOR: color, AttributeKey.UNDERLINE_STYLE: int(style)},
            in_range,
        )

    def applying_strikethrough(
        self,
        style: int,
        color: Any,
        in_range: Optional[RangeLike] = None,
    ) -> "AttributedString":
        """style — толщина линии зачёркивания."""
        return self.applying(
            {AttributeKey.STRIKETHROUGH_STYLE: style, AttributeKey.STRIKETHROUGH_COLOR: color},
            in_range,
        )

    def applying_font(self, font: Any, in_range: Optional[RangeLike] = None) -> "AttributedString":
        return self.applying({AttributeKey.FONT: font}, in_range)

    def applying_foreground_color(
        self, color: Any, in_range: Optional[RangeLike] = None
    ) -> "AttributedString":
        return self.applying({AttributeKey.FOREGROUND_COLOR: color}, in_range)

    def applying_background_color(
        self, color: Any, in_range: Optional[RangeLike] = None
    ) -> "AttributedString":
        return self.applying({AttributeKey.BACKGROUND_COLOR: color}, in_range)

    def applying_shadow(
        self, shadow: Shadow, in_range: Optional[RangeLike] = None
    ) -> "AttributedString":
        return self.applying({AttributeKey.SHADOW: shadow}, in_range)

    def attributes_at(self, index: int) -> dict[str, Any]:
        """
        Итоговые атрибуты символа с учётом перекрытий.

        Raises:
            IndexError: Если index вне [0, len)
        """
        if not 0 <= index < len(self.text):
            raise IndexError(f"index {index} out of range for length {len(self.text)}")

        merged: dict[str, Any] = {}
        for run in self.runs:
            if run.covers(index):
                merged.update(run.attributes)
        return merged

    def __add__(self, other: Union["AttributedString", str]) -> "AttributedString":
        if isinstance(other, str):
            other = AttributedString(text=other)
        if not isinstance(other, AttributedString):
            return NotImplemented

        offset = len(self.text)
        shifted = tuple(
            run.model_copy(update={"start": run.start + offset}) for run in other.runs
        )
        return AttributedString(text=self.text + other.text, runs=self.runs + shifted)

    def __radd__(self, other: str) -> "AttributedString":
        if not isinstance(other, str):
            return NotImplemented
        return AttributedString(text=other) + self
