"""A string-keyed map that can dispose of values as they leave it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from vbbs.arraylist import Comparator, same_item

Destructor = Callable[[Any], None]


@dataclass
class _Entry:
    value: Any
    destructor: Optional[Destructor]


class Map:
    """Maps string keys to values, running a destructor on discarded values.

    A discarded value is only passed to its destructor when no other
    entry of the map still holds that very object. ``None`` values are
    never passed to a destructor.
    """

    def __init__(self, value_destructor: Optional[Destructor] = None) -> None:
        self.value_destructor = value_destructor
        self._entries: dict[str, _Entry] = {}

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"map keys must be strings, not {type(key).__name__}")

    def _dispose(self, value: Any, destructor: Optional[Destructor]) -> None:
        if value is None or destructor is None:
            return
        if not self.contains_value(value):
            destructor(value)

    def put(self, key: str, value: Any, destructor: Optional[Destructor] = None) -> None:
        """Store value under key, disposing of any value it replaces.

        Without a destructor the map's own value destructor applies.
        """
        self._check_key(key)
        chosen = destructor if destructor is not None else self.value_destructor
        entry = self._entries.get(key)
        if entry is None:
            self._entries[key] = _Entry(value, chosen)
            return
        old = entry.value
        entry.value = None
        self._dispose(old, chosen)
        entry.value = value
        entry.destructor = chosen

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under key, or default."""
        self._check_key(key)
        entry = self._entries.get(key)
        return default if entry is None else entry.value

    def __getitem__(self, key: str) -> Any:
        self._check_key(key)
        try:
            return self._entries[key].value
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        self._check_key(key)
        if key not in self._entries:
            raise KeyError(key)
        entry = self._entries.pop(key)
        self._dispose(entry.value, entry.destructor)

    def remove(self, key: str) -> None:
        """Remove key if present; a missing key is ignored."""
        self._check_key(key)
        if key in self._entries:
            del self[key]

    def clear(self) -> None:
        """Remove every entry, disposing of each distinct value once."""
        while self._entries:
            key = next(reversed(self._entries))
            del self[key]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._entries

    def contains_value(self, value: Any, comparator: Optional[Comparator] = None) -> bool:
        """True when some entry's value matches; identity by default."""
        compare = comparator or same_item
        return any(compare(entry.value, value) for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {e.value!r}" for k, e in self._entries.items())
        return f"Map({{{items}}})"