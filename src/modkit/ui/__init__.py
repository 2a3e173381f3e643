"""
UI-oriented value helpers: colors, fonts, reusable views.

Только модели данных и чистые функции; рендеринг и layout остаются
за пределами библиотеки.
"""

from modkit.ui.color import (
    OPAQUE,
    TRANSPARENT,
    Color,
    DynamicColor,
    InterfaceStyle,
)
from modkit.ui.fonts import FontDescriptor, FontWeight, TextStyle, preferred_font
from modkit.ui.reuse import (
    MissingReuseIdentifier,
    ReusableViewRegistry,
    ReuseIdentifierNotRegistered,
    reuse_identifier,
)

__all__ = [
    # Color
    "OPAQUE",
    "TRANSPARENT",
    "Color",
    "DynamicColor",
    "InterfaceStyle",
    # Fonts
    "FontDescriptor",
    "FontWeight",
    "TextStyle",
    "preferred_font",
    # Reuse
    "MissingReuseIdentifier",
    "ReusableViewRegistry",
    "ReuseIdentifierNotRegistered",
    "reuse_identifier",
]
