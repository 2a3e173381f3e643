"""
Optionals — Хелперы для значений, которые могут быть None

Python-аналог Optional: значение либо присутствует, либо None.
"""

from typing import Any, Callable, Optional, Sized, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def has_value(value: Optional[Any]) -> bool:
    return value is not None


def is_none(value: Optional[Any]) -> bool:
    return value is None


def is_empty_or_none(value: Optional[Sized]) -> bool:
    """
    True для None и для пустой коллекции/строки.

    Examples:
        >>> is_empty_or_none(None)
        True
        >>> is_empty_or_none([])
        True
        >>> is_empty_or_none({12: "34"})
        False
    """
    return value is None or len(value) == 0


def unwrapped_or(value: Optional[T], default: T) -> T:
    """
    Значение или default, если значение None.

    Falsy-значения (0, "", []) считаются присутствующими.

    Examples:
        >>> unwrapped_or(None, 10)
        10
        >>> unwrapped_or(0, 10)
        0
    """
    return default if value is None else value


def unwrapped_or_else(value: Optional[T], factory: Callable[[], T]) -> T:
    """
    Значение или результат factory(), если значение None.

    factory вызывается лениво и только при отсутствии значения;
    исключения из factory пробрасываются как есть.
    """
    if value is None:
        return factory()
    return value


def if_present(value: Optional[T], action: Callable[[T], R]) -> Optional[R]:
    """
    Вызов action(value), если значение присутствует.

    Returns:
        Результат action или None
    """
    if value is None:
        return None
    return action(value)
