"""
Flags — Хелперы для option set (enum.Flag)
"""

from enum import Flag
from typing import TypeVar

F = TypeVar("F", bound=Flag)


def empty_flags(flag_type: type[F]) -> F:
    """Пустой набор флагов заданного типа."""
    return flag_type(0)


def inserting_flag(flags: F, member: F) -> F:
    """
    Examples:
        >>> from enum import Flag, auto
        >>> class Day(Flag):
        ...     MON = auto()
        ...     WED = auto()
        ...     FRI = auto()
        >>> inserting_flag(Day.MON | Day.WED, Day.FRI) == Day.MON | Day.WED | Day.FRI
        True
    """
    return flags | member


def removing_flag(flags: F, member: F) -> F:
    """Набор без member и без всех флагов, которые member включает."""
    return flags & ~member
