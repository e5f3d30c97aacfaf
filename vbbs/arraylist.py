"""A growable list that can dispose of items as they are removed."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

Destructor = Callable[[Any], None]
Comparator = Callable[[Any, Any], bool]


def same_item(item1: Any, item2: Any) -> bool:
    """True when both arguments are the very same object."""
    return item1 is item2


def equal_items(item1: Any, item2: Any) -> bool:
    """True when both arguments compare equal."""
    return item1 == item2


def equal_ignore_case(item1: str, item2: str) -> bool:
    """True when two strings are equal apart from ASCII letter case."""
    return _ascii_lower(item1) == _ascii_lower(item2)


def _ascii_lower(text: str) -> str:
    return "".join(
        chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text
    )


def _fixed_width(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def uint8_equal(item1: int, item2: int) -> bool:
    """True when both integers agree as unsigned 8-bit values."""
    return _fixed_width(item1, 8, False) == _fixed_width(item2, 8, False)


def uint16_equal(item1: int, item2: int) -> bool:
    """True when both integers agree as unsigned 16-bit values."""
    return _fixed_width(item1, 16, False) == _fixed_width(item2, 16, False)


def uint32_equal(item1: int, item2: int) -> bool:
    """True when both integers agree as unsigned 32-bit values."""
    return _fixed_width(item1, 32, False) == _fixed_width(item2, 32, False)


def int8_equal(item1: int, item2: int) -> bool:
    """True when both integers agree as signed 8-bit values."""
    return _fixed_width(item1, 8, True) == _fixed_width(item2, 8, True)


def int16_equal(item1: int, item2: int) -> bool:
    """True when both integers agree as signed 16-bit values."""
    return _fixed_width(item1, 16, True) == _fixed_width(item2, 16, True)


def int32_equal(item1: int, item2: int) -> bool:
    """True when both integers agree as signed 32-bit values."""
    return _fixed_width(item1, 32, True) == _fixed_width(item2, 32, True)


class ArrayList:
    """An ordered list whose optional destructor runs on removed items.

    The destructor is called for a removed item only when no other
    reference to that same object remains in the list. Indices run
    from 0 to len - 1.
    """

    def __init__(self, destructor: Optional[Destructor] = None) -> None:
        self._items: list[Any] = []
        self.destructor = destructor

    def append(self, item: Any) -> None:
        """Add an item to the end of the list."""
        self._items.append(item)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"list index {index} out of range")

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __delitem__(self, index: int) -> None:
        self._check_index(index)
        value = self._items.pop(index)
        if self.destructor is not None and not self.contains(value):
            self.destructor(value)

    def clear(self) -> None:
        """Remove every item, last first, running the destructor."""
        while self._items:
            del self[len(self._items) - 1]

    def is_empty(self) -> bool:
        """True when the list holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def contains(self, item: Any, comparator: Optional[Comparator] = None) -> bool:
        """True when some element matches item; identity by default."""
        compare = comparator or same_item
        return any(compare(element, item) for element in self._items)

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r})"