"""
Mappings — Хелперы для словарей

Поиск ключа по значению (равенство) и по ссылке (identity),
копирующие версии добавления/удаления.
"""

from typing import Any, Hashable, Mapping, Optional, TypeVar

from modkit.core.copying import mutating

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def has_key(mapping: Mapping[K, Any], key: K) -> bool:
    return key in mapping


def adding(mapping: Mapping[K, V], value: V, key: K) -> dict[K, V]:
    """
    Копия словаря с установленным значением для key.

    Examples:
        >>> adding({"a": 1}, 2, "b")
        {'a': 1, 'b': 2}
    """
    return mutating(dict(mapping), lambda result: result.__setitem__(key, value))


def removing_value(mapping: Mapping[K, V], key: K) -> dict[K, V]:
    """Копия словаря без key. Отсутствующий ключ не считается ошибкой."""
    return mutating(dict(mapping), lambda result: result.pop(key, None))


def key_by_value(mapping: Mapping[K, V], value: V) -> Optional[K]:
    """
    Первый (в порядке вставки) ключ со значением, равным value.

    Examples:
        >>> key_by_value({"a": 1, "b": 2, "c": 3}, 2)
        'b'
        >>> key_by_value({"a": 1}, 0) is None
        True
    """
    for key, item in mapping.items():
        if item == value:
            return key
    return None


def key_by_reference(mapping: Mapping[K, V], obj: V) -> Optional[K]:
    """Первый ключ, значение которого — тот же объект (`is`), что и obj."""
    for key, item in mapping.items():
        if item is obj:
            return key
    return None


def keys_list(mapping: Mapping[K, Any]) -> list[K]:
    return list(mapping.keys())


def values_list(mapping: Mapping[Any, V]) -> list[V]:
    return list(mapping.values())
