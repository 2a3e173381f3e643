"""
Domain value objects.

Сейчас содержит модели диапазонов (ClosedRange, HalfOpenRange, частичные).
"""

from modkit.core.domain.ranges import (
    AnyRange,
    ClosedRange,
    HalfOpenRange,
    PartialRangeFrom,
    PartialRangeThrough,
    PartialRangeUpTo,
    as_range,
    clamped,
    is_in_range,
    is_subrange,
)

__all__ = [
    # Models
    "AnyRange",
    "ClosedRange",
    "HalfOpenRange",
    "PartialRangeFrom",
    "PartialRangeThrough",
    "PartialRangeUpTo",
    # Functions
    "as_range",
    "clamped",
    "is_in_range",
    "is_subrange",
]
