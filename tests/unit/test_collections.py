"""
Тесты для модулей sets, mappings, optionals, flags и copying
"""

import threading
from enum import Flag, auto

import pytest

from modkit.core.collections import flags, mappings, optionals, sets
from modkit.core.copying import mutating


class Permission(Flag):
    READ = auto()
    WRITE = auto()
    EXECUTE = auto()
    READ_WRITE = READ | WRITE


class Node:
    """Объект с hash и равенством по identity"""


# =============================================================================
# COPYING
# =============================================================================


class TestMutating:
    """Тесты для mutating"""

    def test_copy_is_shallow(self) -> None:
        original = {"items": [1, 2]}
        result = mutating(original, lambda value: value.__setitem__("extra", 3))
        assert result == {"items": [1, 2], "extra": 3}
        assert original == {"items": [1, 2]}
        assert result["items"] is original["items"]

    def test_uncopyable_values_are_shared(self) -> None:
        lock = threading.Lock()
        result = mutating({"lock": lock}, lambda value: value.__setitem__("x", 1))
        assert result["lock"] is lock

    def test_exception_propagates(self) -> None:
        with pytest.raises(KeyError):
            mutating({}, lambda value: value.pop("missing"))


# =============================================================================
# SETS
# =============================================================================


class TestSets:
    """Тесты хелперов множеств"""

    def test_inserting(self) -> None:
        original = {0, 1}
        assert sets.inserting(original, 2) == {0, 1, 2}
        assert original == {0, 1}

    def test_inserting_all(self) -> None:
        assert sets.inserting_all({0}, [1, 2, 2]) == {0, 1, 2}

    def test_removing_missing_is_noop(self) -> None:
        assert sets.removing({0, 1, 2, 3}, 2) == {0, 1, 3}
        assert sets.removing({0, 1}, 9) == {0, 1}

    def test_frozenset_type_preserved(self) -> None:
        result = sets.removing_all(frozenset({0, 1, 2, 3}), [2, 3])
        assert result == frozenset({0, 1})
        assert isinstance(result, frozenset)
        assert isinstance(sets.inserting(frozenset(), 1), frozenset)

    def test_identity_hashed_elements_survive(self) -> None:
        """Объекты с hash по identity остаются теми же объектами"""
        node = Node()
        inserted = sets.inserting({node}, 1)
        assert node in inserted
        assert node in sets.removing({node, 1}, 1)
        assert node not in sets.removing(inserted, node)

    def test_remove_all_in_place(self) -> None:
        items = {1, 2, 3}
        sets.remove_all(items, [1, 3, 5])
        assert items == {2}


# =============================================================================
# MAPPINGS
# =============================================================================


class TestMappings:
    """Тесты хелперов словарей"""

    def test_has_key(self) -> None:
        assert mappings.has_key({"a": None}, "a")
        assert not mappings.has_key({"a": 1}, "b")

    def test_adding_copies(self) -> None:
        original = {"a": 1}
        assert mappings.adding(original, 2, "b") == {"a": 1, "b": 2}
        assert mappings.adding(original, 5, "a") == {"a": 5}
        assert original == {"a": 1}

    def test_removing_value(self) -> None:
        assert mappings.removing_value({"a": 1, "b": 2}, "a") == {"b": 2}
        assert mappings.removing_value({"a": 1}, "zzz") == {"a": 1}

    def test_key_by_value_first_in_insertion_order(self) -> None:
        assert mappings.key_by_value({"x": 1, "y": 2, "z": 2}, 2) == "y"
        assert mappings.key_by_value({"x": 1}, 0) is None

    def test_key_by_reference_uses_identity(self) -> None:
        target = [1]
        data = {"equal": [1], "same": target}
        assert mappings.key_by_reference(data, target) == "same"
        assert mappings.key_by_reference(data, [2]) is None

    def test_key_by_reference_after_copying(self) -> None:
        """Копирующие хелперы не подменяют значения копиями"""
        node = Node()
        added = mappings.adding({"a": node}, 2, "b")
        assert mappings.key_by_reference(added, node) == "a"
        removed = mappings.removing_value({"a": node, "b": 2}, "b")
        assert mappings.key_by_reference(removed, node) == "a"

    def test_adding_with_uncopyable_value(self) -> None:
        lock = threading.Lock()
        result = mappings.adding({"lock": lock}, 1, "x")
        assert result == {"lock": lock, "x": 1}

    def test_keys_and_values_lists(self) -> None:
        data = {"b": 2, "a": 1}
        assert mappings.keys_list(data) == ["b", "a"]
        assert mappings.values_list(data) == [2, 1]


# =============================================================================
# OPTIONALS
# =============================================================================


class TestOptionals:
    """Тесты хелперов Optional"""

    def test_presence(self) -> None:
        assert optionals.has_value(0)
        assert not optionals.has_value(None)
        assert optionals.is_none(None)

    def test_is_empty_or_none(self) -> None:
        assert optionals.is_empty_or_none(None)
        assert optionals.is_empty_or_none("")
        assert not optionals.is_empty_or_none({12: "34"})

    def test_unwrapped_or_treats_falsy_as_present(self) -> None:
        assert optionals.unwrapped_or(None, 10) == 10
        assert optionals.unwrapped_or(0, 10) == 0
        assert optionals.unwrapped_or("", "x") == ""

    def test_unwrapped_or_else_is_lazy(self) -> None:
        def factory() -> int:
            raise AssertionError("factory must not be called")

        assert optionals.unwrapped_or_else(5, factory) == 5
        assert optionals.unwrapped_or_else(None, lambda: 7) == 7

    def test_unwrapped_or_else_propagates_error(self) -> None:
        def factory() -> int:
            raise LookupError("no default")

        with pytest.raises(LookupError, match="no default"):
            optionals.unwrapped_or_else(None, factory)

    def test_if_present(self) -> None:
        assert optionals.if_present(3, lambda v: v * 2) == 6
        assert optionals.if_present(None, lambda v: v * 2) is None


# =============================================================================
# FLAGS
# =============================================================================


class TestFlags:
    """Тесты хелперов option set"""

    def test_empty(self) -> None:
        empty = flags.empty_flags(Permission)
        assert not empty
        assert Permission.READ not in empty

    def test_inserting(self) -> None:
        result = flags.inserting_flag(Permission.READ, Permission.EXECUTE)
        assert Permission.READ in result and Permission.EXECUTE in result
        assert Permission.WRITE not in result

    def test_removing(self) -> None:
        all_flags = Permission.READ | Permission.WRITE | Permission.EXECUTE
        assert flags.removing_flag(all_flags, Permission.WRITE) == Permission.READ | Permission.EXECUTE

    def test_removing_composite_member(self) -> None:
        """Удаление составного флага снимает все входящие в него биты"""
        all_flags = Permission.READ | Permission.WRITE | Permission.EXECUTE
        assert flags.removing_flag(all_flags, Permission.READ_WRITE) == Permission.EXECUTE
