"""
Copy-then-mutate helper.

Позволяет применять мутирующие операции к копии значения, не трогая оригинал.
"""

import copy
from typing import Any, Callable, TypeVar

V = TypeVar("V")


def mutating(value: V, mutate: Callable[[V], Any]) -> V:
    """
    Возвращает поверхностную копию value после применения к ней mutate.

    Копируется только контейнер: вложенные объекты остаются общими
    с оригиналом.

    Examples:
        >>> original = [1, 2, 3]
        >>> mutating(original, lambda items: items.append(4))
        [1, 2, 3, 4]
        >>> original
        [1, 2, 3]
    """
    value = copy.copy(value)
    mutate(value)
    return value
