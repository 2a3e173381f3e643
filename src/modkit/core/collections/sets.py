"""
Sets — Хелперы для множеств

Все `<verb>ing` функции возвращают новое множество того же типа
(set или frozenset), исходное не меняется.
"""

from typing import AbstractSet, Iterable, TypeVar

from modkit.core.copying import mutating

T = TypeVar("T")
S = TypeVar("S", bound=AbstractSet)


def inserting(items: S, element: T) -> S:
    """
    Examples:
        >>> sorted(inserting({0, 1}, 2))
        [0, 1, 2]
    """
    return type(items)(mutating(set(items), lambda result: result.add(element)))


def inserting_all(items: S, elements: Iterable[T]) -> S:
    return type(items)(set(items).union(elements))


def removing(items: S, element: T) -> S:
    """
    Отсутствующий элемент не считается ошибкой.

    Examples:
        >>> sorted(removing({0, 1, 2, 3}, 2))
        [0, 1, 3]
    """
    return type(items)(mutating(set(items), lambda result: result.discard(element)))


def removing_all(items: S, elements: Iterable[T]) -> S:
    """
    Examples:
        >>> sorted(removing_all(frozenset({0, 1, 2, 3}), [2, 3]))
        [0, 1]
    """
    return type(items)(set(items).difference(elements))


def remove_all(items: set[T], elements: Iterable[T]) -> None:
    """Удаление элементов на месте."""
    items.difference_update(elements)
