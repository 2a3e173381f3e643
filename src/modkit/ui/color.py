"""
Color — RGBA цвет

Immutable Pydantic модель с компонентами в [0, 1], разбор hex-строк
и целых чисел, случайный цвет и пара light/dark для тёмной темы.
"""

import random as _random
import re
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

OPAQUE: Final[float] = 1.0
TRANSPARENT: Final[float] = 0.0

# Обрезка не-буквенно-цифровых символов по краям ("#", пробелы, кавычки)
_EDGE_NON_ALNUM: Final[re.Pattern[str]] = re.compile(r"^[\W_]+|[\W_]+$")
# Ведущие hex-цифры (с необязательным префиксом 0x)
_LEADING_HEX: Final[re.Pattern[str]] = re.compile(r"(?:0[xX])?([0-9A-Fa-f]*)")


def _scan_hex(text: str) -> int:
    match = _LEADING_HEX.match(text)
    digits = match.group(1) if match else ""
    return int(digits, 16) if digits else 0


# =============================================================================
# COLOR
# =============================================================================


class Color(BaseModel):
    """
    Цвет в пространстве sRGB.

    Examples:
        >>> Color.from_hex_string("#FF8000").to_hex_string()
        '#FF8000'
        >>> Color.from_hex_int(0x00FF00, alpha=0.5).green
        1.0
    """

    red: float = Field(0.0, ge=0.0, le=1.0)
    green: float = Field(0.0, ge=0.0, le=1.0)
    blue: float = Field(0.0, ge=0.0, le=1.0)
    alpha: float = Field(OPAQUE, ge=0.0, le=1.0)

    model_config = {"frozen": True}

    @classmethod
    def from_rgba8(cls, red: int, green: int, blue: int, alpha: int = 255) -> "Color":
        """Цвет из 8-битных компонент (0..255)."""
        return cls(red=red / 255, green=green / 255, blue=blue / 255, alpha=alpha / 255)

    @classmethod
    def from_hex_int(cls, value: int, alpha: float = OPAQUE) -> "Color":
        """
        Цвет из числа 0xRRGGBB; старшие биты игнорируются.

        Args:
            value: Число вида 0xRRGGBB
            alpha: Прозрачность (0..1)
        """
        return cls(
            red=((value & 0xFF0000) >> 16) / 255.0,
            green=((value & 0x00FF00) >> 8) / 255.0,
            blue=(value & 0x0000FF) / 255.0,
            alpha=alpha,
        )

    @classmethod
    def from_hex_string(cls, text: str) -> "Color":
        """
        Цвет из hex-строки.

        Не-буквенно-цифровые символы по краям отбрасываются, затем
        по длине строки выбирается формат:
        - 3 символа: RGB (12 бит), каждая цифра умножается на 17
        - 6 символов: RRGGBB
        - 8 символов: AARRGGBB
        - иначе: непрозрачный чёрный

        Значение читается из ведущих hex-цифр; "#12G" даёт 0x12.

        Examples:
            >>> Color.from_hex_string("#F80") == Color.from_hex_string("FF8800")
            True
            >>> Color.from_hex_string("80FF0000").alpha
            0.5019607843137255
        """
        trimmed = _EDGE_NON_ALNUM.sub("", text)
        value = _scan_hex(trimmed)

        if len(trimmed) == 3:
            red, green, blue = (value >> 8) * 17, (value >> 4 & 0xF) * 17, (value & 0xF) * 17
            alpha = 255
        elif len(trimmed) == 6:
            red, green, blue, alpha = value >> 16, value >> 8 & 0xFF, value & 0xFF, 255
        elif len(trimmed) == 8:
            red, green, blue, alpha = value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF, value >> 24
        else:
            red, green, blue, alpha = 0, 0, 0, 255

        return cls.from_rgba8(red, green, blue, alpha)

    @classmethod
    def random(cls, rng: Optional[_random.Random] = None) -> "Color":
        """Случайный непрозрачный цвет; rng позволяет получить воспроизводимый результат."""
        rng = rng or _random.Random()
        return cls(
            red=rng.uniform(0.0, 1.0),
            green=rng.uniform(0.0, 1.0),
            blue=rng.uniform(0.0, 1.0),
        )

    def to_hex_string(self, include_alpha: bool = False) -> str:
        """
        "#RRGGBB" (или "#AARRGGBB" при include_alpha).

        Компоненты округляются до ближайшего 8-битного значения.
        """
        channels = [self.red, self.green, self.blue]
        if include_alpha:
            channels.insert(0, self.alpha)
        return "#" + "".join(f"{round(channel * 255):02X}" for channel in channels)

    def with_alpha(self, alpha: float) -> "Color":
        """Копия с другой прозрачностью (alpha валидируется)."""
        return Color(red=self.red, green=self.green, blue=self.blue, alpha=alpha)


# =============================================================================
# DYNAMIC COLOR
# =============================================================================


class InterfaceStyle(str, Enum):
    """Стиль интерфейса (тема)"""

    UNSPECIFIED = "unspecified"
    LIGHT = "light"
    DARK = "dark"


class DynamicColor(BaseModel):
    """
    Пара цветов для светлой и тёмной темы.

    Всё, кроме DARK, разрешается в светлый вариант.
    """

    light: Color
    dark: Color

    model_config = {"frozen": True}

    def resolved(self, style: InterfaceStyle) -> Color:
        return self.dark if style == InterfaceStyle.DARK else self.light

    @property
    def light_mode_color(self) -> Color:
        return self.resolved(InterfaceStyle.LIGHT)

    @property
    def dark_mode_color(self) -> Color:
        return self.resolved(InterfaceStyle.DARK)
