"""
Strings — Хелперы для строк

- Строгий парсинг int (None вместо исключения)
- Общий суффикс двух строк
- Первые/последние K символов с клампом
- Trim, capitalize, regex-предикаты (e-mail)
- Срезы по моделям диапазонов, безопасная и небезопасная индексация

Индексы — позиции code point'ов Python-строки.
"""

import re
import unicodedata
from typing import Final, Optional

from modkit.core.collections import sequences
from modkit.core.domain.ranges import (
    AnyRange,
    ClosedRange,
    HalfOpenRange,
    PartialRangeFrom,
    PartialRangeThrough,
    PartialRangeUpTo,
    as_range,
)
from modkit.core.text.attributed import AttributedString

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

EMAIL_PATTERN: Final[str] = r"[A-Z0-9a-z._-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}"

# Только ASCII-цифры с необязательным знаком: без пробелов и "_"
_STRICT_INT: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Горизонтальные пробелы: категория Zs плюс табуляция
_HORIZONTAL_WHITESPACE_EXTRA: Final[frozenset[str]] = frozenset({"\t"})

_WORD: Final[re.Pattern[str]] = re.compile(r"\S+")


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def to_int(text: str) -> Optional[int]:
    """
    Строгий парсинг целого числа.

    В отличие от int(), не принимает пробелы по краям и разделители "_".

    Examples:
        >>> to_int("213")
        213
        >>> to_int(" 213") is None
        True
        >>> to_int("-7")
        -7
    """
    if _STRICT_INT.fullmatch(text) is None:
        return None
    return int(text)


def to_character(text: str) -> Optional[str]:
    """Единственный символ строки, либо None для пустой/многосимвольной строки."""
    return text if len(text) == 1 else None


def to_attributed(text: str) -> AttributedString:
    return AttributedString(text=text)


# =============================================================================
# ПОДСТРОКИ
# =============================================================================


def common_suffix(text: str, other: str) -> str:
    """
    Общий суффикс двух строк.

    Examples:
        >>> common_suffix("abcde", "abde")
        'de'
        >>> common_suffix("abc", "xyz")
        ''
    """
    length = 0
    for lhs, rhs in zip(reversed(text), reversed(other)):
        if lhs != rhs:
            break
        length += 1
    return text[len(text) - length :]


def first(text: str, k: int) -> str:
    """
    Examples:
        >>> first("abcde", 3)
        'abc'
    """
    return sequences.first(text, k)


def last(text: str, k: int) -> str:
    """
    Examples:
        >>> last("abcde", 3)
        'cde'
    """
    return sequences.last(text, k)


def _check_bound(offset: int, length: int, inclusive_end: bool = True) -> None:
    limit = length if inclusive_end else length - 1
    if not 0 <= offset <= limit:
        raise IndexError(f"string offset {offset} out of range for length {length}")


def substring(text: str, bounds: AnyRange | range) -> str:
    """
    Срез строки по целочисленному диапазону.

    Args:
        text: Исходная строка
        bounds: ClosedRange, HalfOpenRange/range, PartialRangeFrom,
            PartialRangeUpTo или PartialRangeThrough

    Raises:
        IndexError: Если границы выходят за пределы строки

    Examples:
        >>> substring("Hello", ClosedRange(lower=1, upper=3))
        'ell'
        >>> substring("Hello", range(0, 4))
        'Hell'
        >>> substring("Hello", PartialRangeFrom(lower=2))
        'llo'
    """
    bounds = as_range(bounds)
    size = len(text)

    if isinstance(bounds, ClosedRange):
        _check_bound(bounds.lower, size)
        _check_bound(bounds.upper, size, inclusive_end=False)
        return text[bounds.lower : bounds.upper + 1]
    if isinstance(bounds, HalfOpenRange):
        _check_bound(bounds.lower, size)
        _check_bound(bounds.upper, size)
        return text[bounds.lower : bounds.upper]
    if isinstance(bounds, PartialRangeFrom):
        _check_bound(bounds.lower, size)
        return text[bounds.lower :]
    if isinstance(bounds, PartialRangeUpTo):
        _check_bound(bounds.upper, size)
        return text[: bounds.upper]
    if isinstance(bounds, PartialRangeThrough):
        _check_bound(bounds.upper, size, inclusive_end=False)
        return text[: bounds.upper + 1]

    raise TypeError(f"unsupported bounds type {type(bounds).__name__}")


def character_at(text: str, offset: int) -> str:
    """
    Символ по смещению; отрицательные смещения не поддерживаются.

    Raises:
        IndexError: Если offset вне [0, len)
    """
    _check_bound(offset, len(text), inclusive_end=False)
    return text[offset]


def character_at_safe(text: str, offset: int) -> Optional[str]:
    """Символ по смещению или None вне [0, len)."""
    return sequences.element_at(text, offset)


# =============================================================================
# РЕГИСТР И ПРОБЕЛЫ
# =============================================================================


def capitalized(text: str) -> str:
    """
    Каждое слово: первый символ в верхнем регистре, остальные в нижнем.

    Слова разделяются пробельными символами, сами пробелы сохраняются.

    Examples:
        >>> capitalized("woRd")
        'Word'
        >>> capitalized("hello  wORLD")
        'Hello  World'
    """
    return _WORD.sub(lambda word: word.group()[:1].upper() + word.group()[1:].lower(), text)


def trimmed(text: str) -> str:
    """
    Строка без пробелов и переводов строк по краям.

    Examples:
        >>> trimmed("  Hello, world! \\n")
        'Hello, world!'
    """
    return text.strip()


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def matches(text: str, pattern: str) -> bool:
    """True, если вся строка целиком соответствует регулярному выражению."""
    return re.fullmatch(pattern, text) is not None


def is_valid_email(text: str) -> bool:
    """
    Examples:
        >>> is_valid_email("my.email@mod.kit")
        True
        >>> is_valid_email("no-at-sign.kit")
        False
    """
    return matches(text, EMAIL_PATTERN)


def contains_only_digits(text: str) -> bool:
    """
    True, если все символы — десятичные цифры Unicode (категория Nd).

    Пустая строка удовлетворяет условию.
    """
    return all(unicodedata.category(char) == "Nd" for char in text)


def contains_only_whitespaces(text: str) -> bool:
    """
    True, если все символы — горизонтальные пробелы (Zs или табуляция).

    Переводы строк пробелами не считаются. Пустая строка удовлетворяет условию.

    Examples:
        >>> contains_only_whitespaces("   ")
        True
        >>> contains_only_whitespaces(" a ")
        False
    """
    return all(
        unicodedata.category(char) == "Zs" or char in _HORIZONTAL_WHITESPACE_EXTRA
        for char in text
    )
