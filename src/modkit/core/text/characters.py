"""
Characters — именованные символы и хелперы для одиночных символов.
"""

from typing import Final, Optional

from modkit.core.text.strings import to_int as _string_to_int

OBJECT_REPLACEMENT: Final[str] = "\ufffc"
NONBREAKING_SPACE: Final[str] = "\u00a0"
THIN_SPACE: Final[str] = "\u2009"
SPACE: Final[str] = "\u0020"
NEWLINE: Final[str] = "\u000a"
TAB: Final[str] = "\u0009"


def _check_character(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def uppercased(char: str) -> str:
    """
    Верхний регистр символа.

    Если case mapping даёт несколько символов ("ß" -> "SS"), берётся первый.
    """
    _check_character(char)
    return char.upper()[0]


def lowercased(char: str) -> str:
    _check_character(char)
    return char.lower()[0]


def to_int(char: str) -> Optional[int]:
    """
    Examples:
        >>> to_int("4")
        4
        >>> to_int("x") is None
        True
    """
    _check_character(char)
    return _string_to_int(char)
