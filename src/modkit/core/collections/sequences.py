"""
Sequences — Хелперы для списков и последовательностей

Две формы для каждой операции, где это имеет смысл:
- `<verb>ing(seq, ...)` возвращает новый список, исходная последовательность не меняется
- `<verb>(lst, ...)` мутирует переданный list на месте и возвращает None

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. first/last никогда не падают на выходе за границы: k клампится в [0, len]
2. removing_duplicates сохраняет порядок первых вхождений
3. Операции с "references" сравнивают по identity (`is`), а не по равенству
"""

import functools
import operator
from collections import deque
from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


# =============================================================================
# ВНУТРЕННИЕ ПРОВЕРКИ
# =============================================================================


def _check_index(index: int, size: int, name: str) -> None:
    if not 0 <= index < size:
        raise IndexError(f"{name} {index} out of range for length {size}")


# =============================================================================
# ПЕРЕСТАНОВКА
# =============================================================================


def rearranging_element(seq: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """
    Новый список, в котором элемент перемещён с from_index на to_index.

    Элемент сначала удаляется, затем вставляется: to_index отсчитывается
    в списке без перемещаемого элемента.

    Raises:
        IndexError: Если from_index или to_index вне диапазона

    Examples:
        >>> rearranging_element(["a", "b", "c", "d"], 3, 1)
        ['a', 'd', 'b', 'c']
    """
    result = list(seq)
    rearrange_element(result, from_index, to_index)
    return result


def rearrange_element(lst: list[T], from_index: int, to_index: int) -> None:
    """Перемещение элемента с from_index на to_index на месте."""
    _check_index(from_index, len(lst), "from_index")
    # После удаления допустима вставка в конец (to_index == len - 1)
    _check_index(to_index, len(lst), "to_index")

    element = lst.pop(from_index)
    lst.insert(to_index, element)


# =============================================================================
# ДОБАВЛЕНИЕ
# =============================================================================


def appending(seq: Sequence[T], element: T) -> list[T]:
    """
    Examples:
        >>> appending([0, 1], 2)
        [0, 1, 2]
    """
    return [*seq, element]


def appending_all(seq: Sequence[T], elements: Iterable[T]) -> list[T]:
    return [*seq, *elements]


def prepending(seq: Sequence[T], element: T) -> list[T]:
    return [element, *seq]


def prepending_all(seq: Sequence[T], elements: Iterable[T]) -> list[T]:
    """
    Examples:
        >>> prepending_all([3, 4], [1, 2])
        [1, 2, 3, 4]
    """
    return [*elements, *seq]


# =============================================================================
# ПЕРВЫЕ / ПОСЛЕДНИЕ K
# =============================================================================


def first(seq: Sequence[T], k: int) -> Sequence[T]:
    """
    Первые k элементов (тип последовательности сохраняется).

    k клампится в [0, len(seq)].

    Examples:
        >>> first([1, 2, 3, 4, 5], 3)
        [1, 2, 3]
        >>> first("abc", 10)
        'abc'
    """
    k = max(0, min(k, len(seq)))
    return seq[:k]


def last(seq: Sequence[T], k: int) -> Sequence[T]:
    """
    Последние k элементов (тип последовательности сохраняется).

    Examples:
        >>> last([1, 2, 3, 4, 5], 3)
        [3, 4, 5]
        >>> last((1, 2), -1)
        ()
    """
    k = max(0, min(k, len(seq)))
    return seq[len(seq) - k :]


def firsts(iterable: Iterable[T], max_length: int) -> list[T]:
    """
    До max_length первых элементов любого iterable в виде списка.

    При max_length <= 0 возвращается пустой список.
    """
    if max_length <= 0:
        return []
    result: list[T] = []
    for element in iterable:
        result.append(element)
        if len(result) == max_length:
            break
    return result


def lasts(iterable: Iterable[T], max_length: int) -> list[T]:
    """
    До max_length последних элементов любого iterable в виде списка.

    Examples:
        >>> lasts(range(1, 6), 2)
        [4, 5]
        >>> lasts(range(1, 6), 9)
        [1, 2, 3, 4, 5]
    """
    if max_length <= 0:
        return []
    return list(deque(iterable, maxlen=max_length))


# =============================================================================
# УДАЛЕНИЕ
# =============================================================================


def removing(seq: Iterable[T], element: T) -> list[T]:
    """
    Examples:
        >>> removing([1, 2, 3, 2, 4], 2)
        [1, 3, 4]
    """
    return [item for item in seq if item != element]


def removing_all(seq: Iterable[T], elements: Iterable[T]) -> list[T]:
    """
    Examples:
        >>> removing_all([1, 2, 3, 2, 4], [2, 4])
        [1, 3]
    """
    elements = list(elements)
    return [item for item in seq if item not in elements]


def remove(lst: list[T], element: T) -> None:
    """Удаление всех вхождений element на месте."""
    lst[:] = removing(lst, element)


def remove_all(lst: list[T], elements: Iterable[T]) -> None:
    lst[:] = removing_all(lst, elements)


def removing_duplicates(seq: Iterable[T]) -> list[T]:
    """
    Новый список без дубликатов, остаются первые вхождения.

    Hashable-элементы проверяются через set, остальные — линейным поиском,
    поэтому функция работает и для списков dict/list.

    Examples:
        >>> removing_duplicates([1, 2, 3, 2, 4, 4, 5, 4])
        [1, 2, 3, 4, 5]
    """
    result: list[T] = []
    seen_hashable: set[Any] = set()
    for element in seq:
        try:
            if element in seen_hashable:
                continue
            seen_hashable.add(element)
        except TypeError:
            # unhashable
            if element in result:
                continue
        result.append(element)
    return result


def remove_duplicates(lst: list[T]) -> None:
    lst[:] = removing_duplicates(lst)


def removing_references(seq: Iterable[T], objects: Iterable[T]) -> list[T]:
    """
    Новый список без объектов, идентичных (`is`) любому из objects.

    Равные, но не идентичные объекты остаются.
    """
    object_ids = {id(obj) for obj in objects}
    return [item for item in seq if id(item) not in object_ids]


def remove_references(lst: list[T], objects: Iterable[T]) -> None:
    lst[:] = removing_references(lst, objects)


# =============================================================================
# ПОИСК
# =============================================================================


def contains_all(seq: Iterable[T], elements: Iterable[T]) -> bool:
    """
    Examples:
        >>> contains_all([3, 1, 4, 1, 5], [5, 4, 6])
        False
        >>> contains_all([3, 1, 4, 1, 5], [5, 4])
        True
    """
    seq = list(seq)
    return all(element in seq for element in elements)


def indexes_of(seq: Iterable[T], element: T) -> list[int]:
    """
    Examples:
        >>> indexes_of([5, 2, 1, 6, 2], 2)
        [1, 4]
    """
    return [index for index, item in enumerate(seq) if item == element]


def element_at(seq: Sequence[T], index: int) -> Optional[T]:
    """
    Безопасная индексация: None вне [0, len).

    Отрицательные индексы считаются выходом за границы.
    """
    if 0 <= index < len(seq):
        return seq[index]
    return None


def first_excluding(iterable: Iterable[T], excluded: Iterable[T]) -> Optional[T]:
    """
    Первый элемент, не входящий в excluded; None, если таких нет.

    Examples:
        >>> first_excluding(range(1, 11), [1, 2, 4, 5])
        3
    """
    excluded = list(excluded)
    for element in iterable:
        if element not in excluded:
            return element
    return None


# =============================================================================
# АГРЕГАЦИЯ И ПРЕОБРАЗОВАНИЯ
# =============================================================================


def average(values: Iterable[float]) -> float:
    """
    Среднее значение; 0 для пустой коллекции.

    Examples:
        >>> average([1, 2, 3, 4])
        2.5
        >>> average([])
        0
    """
    values = list(values)
    if not values:
        return 0
    return sum(values) / len(values)


def joined(seq: Iterable[Any], separator: str = "") -> str:
    """
    Examples:
        >>> joined([1.2, 3.4, 5.6], " ")
        '1.2 3.4 5.6'
        >>> joined(["H", "i", "!"])
        'Hi!'
    """
    return separator.join(str(element) for element in seq)


def full_map(iterable: Iterable[T], transform: Callable[[T], Optional[R]]) -> Optional[list[R]]:
    """
    Список результатов transform, или None, если хотя бы один результат None.

    Исключения из transform пробрасываются.

    Examples:
        >>> from modkit.core.text.strings import to_int
        >>> full_map(["1", "2", "three"], to_int) is None
        True
        >>> full_map(["1", "2", "3"], to_int)
        [1, 2, 3]
    """
    result: list[R] = []
    for element in iterable:
        transformed = transform(element)
        if transformed is None:
            return None
        result.append(transformed)
    return result


# =============================================================================
# СОРТИРОВКА
# =============================================================================


def _key_function(key: str | Callable[[T], Any]) -> Callable[[T], Any]:
    if isinstance(key, str):
        return operator.attrgetter(key)
    return key


def sorted_by(
    seq: Iterable[T],
    key: str | Callable[[T], Any],
    compare: Optional[Callable[[Any, Any], bool]] = None,
) -> list[T]:
    """
    Сортировка по атрибуту (имя) или функции-ключу.

    Args:
        seq: Исходная последовательность
        key: Имя атрибута ("name", "address.city") или callable
        compare: Предикат "меньше" для значений ключа (по умолчанию `<`)

    Examples:
        >>> sorted_by(["bb", "a", "ccc"], len)
        ['a', 'bb', 'ccc']
        >>> sorted_by([1, 3, 2], lambda x: x, compare=lambda a, b: a > b)
        [3, 2, 1]
    """
    key_function = _key_function(key)
    if compare is None:
        return sorted(seq, key=key_function)

    def cmp(lhs: T, rhs: T) -> int:
        lhs_key, rhs_key = key_function(lhs), key_function(rhs)
        if compare(lhs_key, rhs_key):
            return -1
        if compare(rhs_key, lhs_key):
            return 1
        return 0

    return sorted(seq, key=functools.cmp_to_key(cmp))


def sort_by(
    lst: list[T],
    key: str | Callable[[T], Any],
    compare: Optional[Callable[[Any, Any], bool]] = None,
) -> None:
    """Сортировка списка на месте (см. sorted_by)."""
    lst[:] = sorted_by(lst, key, compare)
