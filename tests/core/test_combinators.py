# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the polymorphic type constructors."""

import pytest

from pyants.core import TypeMismatch, either, list_of, map_of, optional, typedef

INT = typedef("int", lambda x: isinstance(x, int) and not isinstance(x, bool))
STRING = typedef("string", lambda x: isinstance(x, str))

# ###############
# optional
# ###############


def test_optional_name() -> None:
    """optional(T) is named option<T>."""
    assert optional(INT).name == "option<int>"


def test_optional_accepts_none_and_inner() -> None:
    """optional(T) accepts None and any value T accepts."""
    t = optional(INT)
    assert t(None) is None
    assert t(3) == 3


def test_optional_rejects_other_values() -> None:
    """optional(T) rejects values that are neither None nor T."""
    with pytest.raises(TypeMismatch, match="option<int>"):
        optional(INT)("3")


# ###############
# list_of
# ###############


def test_list_of_name() -> None:
    """list_of(T) is named list<T>."""
    assert list_of(INT).name == "list<int>"


def test_list_of_returns_list_unchanged() -> None:
    """A valid list is returned as-is."""
    value = [1, 2, 3]
    assert list_of(INT)(value) is value


def test_list_of_accepts_tuple_and_empty() -> None:
    """Tuples are ordered sequences too, and empty lists pass."""
    assert list_of(INT)((1, 2)) == (1, 2)
    assert list_of(INT)([]) == []


def test_list_of_reports_offending_element() -> None:
    """The first bad element is reported, naming the element type."""
    with pytest.raises(TypeMismatch) as exc_info:
        list_of(INT)([1, "x", 3])

    err = exc_info.value
    assert err.type_name == "int"
    assert err.value == "x"
    assert err.context == "list element"
    assert str(err) == "Expected list element of type 'int', but 'x' is of type 'string'"


def test_list_of_is_fail_fast() -> None:
    """Checking stops at the first failing element, in sequence order."""
    seen: list[object] = []

    def check(x: object) -> bool:
        seen.append(x)
        return isinstance(x, int)

    with pytest.raises(TypeMismatch) as exc_info:
        list_of(typedef("int", check))([1, "a", "b", 4])
    assert exc_info.value.value == "a"
    assert seen == [1, "a"]


def test_list_of_rejects_non_list() -> None:
    """A non-sequence value fails the list type itself."""
    with pytest.raises(TypeMismatch) as exc_info:
        list_of(INT)("123")
    assert exc_info.value.type_name == "list<int>"


def test_nested_list() -> None:
    """Nested list types report the innermost failure."""
    t = list_of(list_of(INT))
    assert t.name == "list<list<int>>"
    assert t([[1], [2, 3]]) == [[1], [2, 3]]
    with pytest.raises(TypeMismatch, match="Expected list element of type 'int'"):
        t([[1], [2, None]])


# ###############
# map_of
# ###############


def test_map_of_name() -> None:
    """map_of(T) is named attrs<T>."""
    assert map_of(STRING).name == "attrs<string>"


def test_map_of_checks_values_only() -> None:
    """Keys are ignored; every value must satisfy T."""
    value = {1: "a", "b": "c"}
    assert map_of(STRING)(value) is value


def test_map_of_reports_a_failing_value() -> None:
    """One failing value produces one mismatch naming the value type."""
    with pytest.raises(TypeMismatch) as exc_info:
        map_of(STRING)({"a": "ok", "b": 2, "c": 3})
    err = exc_info.value
    assert err.type_name == "string"
    assert err.context == "attribute set element"
    assert err.value in (2, 3)


def test_map_of_rejects_non_mapping() -> None:
    """A list is not a mapping."""
    with pytest.raises(TypeMismatch) as exc_info:
        map_of(STRING)(["a"])
    assert exc_info.value.type_name == "attrs<string>"


# ###############
# either
# ###############


def test_either_name() -> None:
    """either(T1, T2) is named either<T1,T2>."""
    assert either(INT, STRING).name == "either<int,string>"


def test_either_accepts_both_branches() -> None:
    """A value accepted by either branch passes."""
    t = either(INT, STRING)
    assert t(1) == 1
    assert t("a") == "a"


def test_either_reports_itself_when_both_fail() -> None:
    """When both branches reject, the either type is named, not a branch."""
    with pytest.raises(TypeMismatch) as exc_info:
        either(INT, STRING)(1.5)
    assert exc_info.value.type_name == "either<int,string>"


def test_either_hides_branch_failures() -> None:
    """A branch that raises internally counts as a plain rejection."""
    t = either(list_of(INT), STRING)
    assert t([1, 2]) == [1, 2]
    with pytest.raises(TypeMismatch) as exc_info:
        t([1, "x"])
    assert exc_info.value.type_name == "either<list<int>,string>"
