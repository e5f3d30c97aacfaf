import pytest

from vbbs.arraylist import (
    ArrayList,
    equal_ignore_case,
    equal_items,
    int8_equal,
    int16_equal,
    int32_equal,
    same_item,
    uint8_equal,
    uint16_equal,
    uint32_equal,
)


def test_append_and_get():
    items = ArrayList()
    items.append("a")
    items.append("b")
    assert len(items) == 2
    assert items[0] == "a"
    assert items[1] == "b"
    assert list(items) == ["a", "b"]


@pytest.mark.parametrize("index", [1, -1, 5])
def test_out_of_range_get_raises(index):
    items = ArrayList()
    items.append(1)
    with pytest.raises(IndexError):
        _ = items[index]
    assert list(items) == [1]


@pytest.mark.parametrize("index", [1, -1, 5])
def test_out_of_range_delete_raises_and_keeps_items(index):
    destroyed = []
    items = ArrayList(destroyed.append)
    items.append(1)
    with pytest.raises(IndexError):
        del items[index]
    assert list(items) == [1]
    assert destroyed == []


def test_delete_shifts_items_and_calls_destructor():
    destroyed = []
    items = ArrayList(destroyed.append)
    for value in ("x", "y", "z"):
        items.append(value)
    del items[1]
    assert list(items) == ["x", "z"]
    assert destroyed == ["y"]


def test_destructor_skipped_while_same_object_remains():
    destroyed = []
    shared = object()
    items = ArrayList(destroyed.append)
    items.append(shared)
    items.append(shared)
    del items[0]
    assert destroyed == []
    del items[0]
    assert destroyed == [shared]


def test_clear_removes_last_first():
    destroyed = []
    items = ArrayList(destroyed.append)
    for value in (1, 2, 3):
        items.append(value)
    items.clear()
    assert items.is_empty()
    assert len(items) == 0
    assert destroyed == [3, 2, 1]


def test_is_empty():
    items = ArrayList()
    assert items.is_empty()
    items.append(None)
    assert not items.is_empty()


def test_contains_defaults_to_identity():
    items = ArrayList()
    stored = [1, 2]
    items.append(stored)
    assert items.contains(stored)
    assert not items.contains([1, 2])
    assert items.contains([1, 2], equal_items)


def test_contains_ignore_case():
    items = ArrayList()
    items.append("Hello")
    assert items.contains("hELLO", equal_ignore_case)
    assert not items.contains("hello", equal_items)


def test_comparators_basic():
    assert same_item(None, None)
    assert equal_items("abc", "abc")
    assert not equal_items("abc", "abd")
    assert equal_ignore_case("ABC", "abc")
    assert not equal_ignore_case("abc", "abd")


@pytest.mark.parametrize(
    "compare,bits",
    [(uint8_equal, 8), (uint16_equal, 16), (uint32_equal, 32)],
)
def test_unsigned_comparators_wrap(compare, bits):
    assert compare(5, 5)
    assert compare(1 << bits, 0)
    assert compare(-1, (1 << bits) - 1)
    assert not compare(1, 2)


@pytest.mark.parametrize(
    "compare,bits",
    [(int8_equal, 8), (int16_equal, 16), (int32_equal, 32)],
)
def test_signed_comparators_wrap(compare, bits):
    assert compare(-3, -3)
    assert compare((1 << bits) - 1, -1)
    assert compare(1 << bits, 0)
    assert not compare(-1, 1)