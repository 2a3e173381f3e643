"""
Text helpers: strings, characters, attributed strings.
"""

from modkit.core.text import characters, strings
from modkit.core.text.attributed import (
    AttributedString,
    AttributeKey,
    AttributeRun,
    Shadow,
    UnderlineStyle,
)

__all__ = [
    # Modules
    "characters",
    "strings",
    # Attributed strings
    "AttributedString",
    "AttributeKey",
    "AttributeRun",
    "Shadow",
    "UnderlineStyle",
]
