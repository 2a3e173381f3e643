"""
Collection helpers: sequences, sets, mappings, optionals, flags.

Модули намеренно не реэкспортируют функции одним пространством имён:
`sequences.removing` и `sets.removing` имеют разную семантику.
"""

from modkit.core.collections import flags, mappings, optionals, sequences, sets

__all__ = [
    "flags",
    "mappings",
    "optionals",
    "sequences",
    "sets",
]
