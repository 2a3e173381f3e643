"""
Тесты для модуля sequences

Проверяет копирующие и мутирующие варианты операций над списками,
клампинг first/last, сравнение по identity, сортировку по ключу.
"""

from dataclasses import dataclass

import pytest

from modkit.core.collections import sequences
from modkit.core.text.strings import to_int


@dataclass
class Person:
    name: str
    age: int


@pytest.fixture
def people() -> list[Person]:
    return [Person("Bob", 40), Person("alice", 31), Person("Carol", 25)]


# =============================================================================
# ПЕРЕСТАНОВКА
# =============================================================================


class TestRearrange:
    """Тесты для rearranging_element / rearrange_element"""

    def test_move_backward(self) -> None:
        assert sequences.rearranging_element(["a", "b", "c", "d"], 3, 1) == ["a", "d", "b", "c"]

    def test_move_forward(self) -> None:
        assert sequences.rearranging_element(["a", "b", "c", "d"], 0, 3) == ["b", "c", "d", "a"]

    def test_copy_leaves_original(self) -> None:
        original = [1, 2, 3]
        sequences.rearranging_element(original, 0, 2)
        assert original == [1, 2, 3]

    def test_in_place(self) -> None:
        items = [1, 2, 3]
        assert sequences.rearrange_element(items, 2, 0) is None
        assert items == [3, 1, 2]

    @pytest.mark.parametrize("from_index,to_index", [(4, 0), (0, 4), (-1, 0)])
    def test_bad_indexes_raise(self, from_index: int, to_index: int) -> None:
        with pytest.raises(IndexError):
            sequences.rearranging_element([1, 2, 3, 4], from_index, to_index)


# =============================================================================
# ДОБАВЛЕНИЕ И ВЫБОРКА
# =============================================================================


class TestAppendPrepend:
    def test_appending(self) -> None:
        assert sequences.appending([0, 1], 2) == [0, 1, 2]
        assert sequences.appending_all((0,), [1, 2]) == [0, 1, 2]

    def test_prepending(self) -> None:
        assert sequences.prepending([1, 2], 0) == [0, 1, 2]
        assert sequences.prepending_all([3, 4], [1, 2]) == [1, 2, 3, 4]


class TestFirstLast:
    """Тесты first/last/firsts/lasts"""

    def test_first_last_clamp_k(self) -> None:
        assert sequences.first([1, 2, 3, 4, 5], 3) == [1, 2, 3]
        assert sequences.last([1, 2, 3, 4, 5], 3) == [3, 4, 5]
        assert sequences.first([1, 2], 10) == [1, 2]
        assert sequences.last([1, 2], -1) == []

    def test_type_preserved(self) -> None:
        assert sequences.first("abc", 2) == "ab"
        assert sequences.last((1, 2, 3), 2) == (2, 3)

    def test_firsts_lasts_on_iterables(self) -> None:
        assert sequences.firsts(iter(range(10)), 3) == [0, 1, 2]
        assert sequences.lasts(range(1, 6), 2) == [4, 5]
        assert sequences.lasts(range(1, 6), 9) == [1, 2, 3, 4, 5]
        assert sequences.firsts(range(5), 0) == []
        assert sequences.lasts(range(5), -3) == []


# =============================================================================
# УДАЛЕНИЕ
# =============================================================================


class TestRemoving:
    """Тесты удаления"""

    def test_removing_all_occurrences(self) -> None:
        assert sequences.removing([1, 2, 3, 2, 4], 2) == [1, 3, 4]
        assert sequences.removing_all([1, 2, 3, 2, 4], [2, 4]) == [1, 3]

    def test_remove_in_place_keeps_identity(self) -> None:
        items = [1, 2, 3, 2]
        alias = items
        sequences.remove(items, 2)
        assert alias == [1, 3]
        sequences.remove_all(items, [1, 3])
        assert alias == []

    def test_removing_duplicates_keeps_first(self) -> None:
        assert sequences.removing_duplicates([1, 2, 3, 2, 4, 4, 5, 4]) == [1, 2, 3, 4, 5]

    def test_removing_duplicates_unhashable(self) -> None:
        items = [{"a": 1}, [1], {"a": 1}, [1], [2]]
        assert sequences.removing_duplicates(items) == [{"a": 1}, [1], [2]]

    def test_remove_duplicates_in_place(self) -> None:
        items = ["b", "a", "b"]
        sequences.remove_duplicates(items)
        assert items == ["b", "a"]

    def test_removing_references_uses_identity(self) -> None:
        first, second, equal_to_first = [1], [2], [1]
        result = sequences.removing_references([first, second, equal_to_first], [first])
        assert result == [[2], [1]]
        assert result[1] is equal_to_first

    def test_remove_references_in_place(self) -> None:
        a, b = object(), object()
        items = [a, b, a]
        sequences.remove_references(items, [a])
        assert items == [b]


# =============================================================================
# ПОИСК И АГРЕГАЦИЯ
# =============================================================================


class TestLookup:
    def test_contains_all(self) -> None:
        assert sequences.contains_all([3, 1, 4, 1, 5], [5, 4])
        assert not sequences.contains_all([3, 1, 4, 1, 5], [5, 4, 6])
        assert sequences.contains_all([1], [])

    def test_indexes_of(self) -> None:
        assert sequences.indexes_of([5, 2, 1, 6, 2], 2) == [1, 4]
        assert sequences.indexes_of([5], 2) == []

    def test_element_at(self) -> None:
        assert sequences.element_at([1, 2, 3], 1) == 2
        assert sequences.element_at([1, 2, 3], 3) is None
        assert sequences.element_at([1, 2, 3], -1) is None

    def test_first_excluding(self) -> None:
        assert sequences.first_excluding(range(1, 11), [1, 2, 4, 5]) == 3
        assert sequences.first_excluding([1, 2], [1, 2]) is None


class TestAggregation:
    def test_average(self) -> None:
        assert sequences.average([1, 2, 3, 4]) == 2.5
        assert sequences.average([]) == 0

    def test_joined(self) -> None:
        assert sequences.joined([1.2, 3.4, 5.6], " ") == "1.2 3.4 5.6"
        assert sequences.joined(["H", "i", "!"]) == "Hi!"

    def test_full_map(self) -> None:
        assert sequences.full_map(["1", "2", "3"], to_int) == [1, 2, 3]
        assert sequences.full_map(["1", "2", "three"], to_int) is None
        assert sequences.full_map([], to_int) == []

    def test_full_map_keeps_falsy_results(self) -> None:
        """Только None прерывает отображение, 0 — нет"""
        assert sequences.full_map(["0", "-0"], to_int) == [0, 0]


# =============================================================================
# СОРТИРОВКА
# =============================================================================


class TestSortedBy:
    """Тесты sorted_by / sort_by"""

    def test_by_attribute_name(self, people: list[Person]) -> None:
        assert [p.age for p in sequences.sorted_by(people, "age")] == [25, 31, 40]

    def test_by_callable(self, people: list[Person]) -> None:
        result = sequences.sorted_by(people, lambda p: p.name.lower())
        assert [p.name for p in result] == ["alice", "Bob", "Carol"]

    def test_with_compare(self, people: list[Person]) -> None:
        result = sequences.sorted_by(people, "age", compare=lambda a, b: a > b)
        assert [p.age for p in result] == [40, 31, 25]

    def test_sort_by_in_place(self, people: list[Person]) -> None:
        sequences.sort_by(people, "name")
        assert [p.name for p in people] == ["Bob", "Carol", "alice"]

    def test_stable(self) -> None:
        pairs = [(1, "a"), (0, "b"), (1, "c")]
        assert sequences.sorted_by(pairs, lambda p: p[0]) == [(0, "b"), (1, "a"), (1, "c")]
