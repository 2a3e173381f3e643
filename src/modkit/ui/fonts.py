"""
Fonts — дескрипторы шрифтов для фиксированной типографической шкалы

Размеры текстовых стилей соответствуют категории размера контента "large"
(значение по умолчанию). Масштабирование под пользовательскую настройку
размера текста — задача UI-слоя: дескриптор хранит text_style для этого.
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional

from pydantic import BaseModel, Field


class TextStyle(str, Enum):
    """Текстовые стили системной шкалы"""

    LARGE_TITLE = "large_title"
    TITLE1 = "title1"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    BODY = "body"
    CALLOUT = "callout"
    SUBHEADLINE = "subheadline"
    FOOTNOTE = "footnote"
    CAPTION1 = "caption1"
    CAPTION2 = "caption2"

    @property
    def point_size(self) -> float:
        return TEXT_STYLE_POINT_SIZES[self]


class FontWeight(float, Enum):
    """Начертание (значения — веса системного шрифта)"""

    ULTRA_LIGHT = -0.8
    THIN = -0.6
    LIGHT = -0.4
    REGULAR = 0.0
    MEDIUM = 0.23
    SEMIBOLD = 0.3
    BOLD = 0.4
    HEAVY = 0.56
    BLACK = 0.62


TEXT_STYLE_POINT_SIZES: Final[Mapping[TextStyle, float]] = MappingProxyType(
    {
        TextStyle.LARGE_TITLE: 34.0,
        TextStyle.TITLE1: 28.0,
        TextStyle.TITLE2: 22.0,
        TextStyle.TITLE3: 20.0,
        TextStyle.HEADLINE: 17.0,
        TextStyle.BODY: 17.0,
        TextStyle.CALLOUT: 16.0,
        TextStyle.SUBHEADLINE: 15.0,
        TextStyle.FOOTNOTE: 13.0,
        TextStyle.CAPTION1: 12.0,
        TextStyle.CAPTION2: 11.0,
    }
)


class FontDescriptor(BaseModel):
    """Описание системного шрифта."""

    point_size: float = Field(..., gt=0)
    weight: FontWeight = FontWeight.REGULAR
    italic: bool = False
    text_style: Optional[TextStyle] = Field(
        None, description="Стиль, от которого масштабируется шрифт (None — фиксированный размер)"
    )

    model_config = {"frozen": True}

    def with_weight(self, weight: FontWeight) -> "FontDescriptor":
        return self.model_copy(update={"weight": weight})

    def with_italic(self, italic: bool = True) -> "FontDescriptor":
        return self.model_copy(update={"italic": italic})


def preferred_font(
    style: TextStyle,
    weight: FontWeight = FontWeight.REGULAR,
    italic: bool = False,
) -> FontDescriptor:
    """
    Шрифт текстового стиля с заданным начертанием.

    Args:
        style: Текстовый стиль (определяет размер)
        weight: Начертание
        italic: Курсив

    Examples:
        >>> font = preferred_font(TextStyle.HEADLINE, FontWeight.BOLD)
        >>> (font.point_size, font.weight, font.text_style)
        (17.0, <FontWeight.BOLD: 0.4>, <TextStyle.HEADLINE: 'headline'>)
    """
    return FontDescriptor(
        point_size=style.point_size,
        weight=weight,
        italic=italic,
        text_style=style,
    )
