from __future__ import annotations

"""Ordered string map used for pass-through attributes and settings."""

from typing import Dict, FrozenSet, Iterable, Iterator, MutableMapping, Optional, Tuple

from ..exceptions import ReservedAttributeError
from ..utils import require

__all__ = ["ExtraAttributes"]


class ExtraAttributes(MutableMapping[str, str]):
    """Insertion-ordered ``str -> str`` map with an insert-if-absent operation.

    Loaders only ever call :meth:`add_if_absent`, so when a source repeats a
    name the first occurrence is the one retained.  Item assignment remains
    available for explicit API use and replaces the stored value.

    Args:
        items: Initial ``(key, value)`` pairs, first occurrence wins
        ignore_blank_values: Treat blank values as absent.  Assigning one
            removes the key, so the map only holds what the owning format
            can write and read back.
        reserved_keys: Names (matched case-insensitively) that belong to a
            dedicated field of the owner and are refused here
        owner: Entity name reported in errors
    """

    def __init__(self, items: Optional[Iterable[Tuple[str, str]]] = None,
                 ignore_blank_values: bool = False,
                 reserved_keys: Iterable[str] = (),
                 owner: Optional[str] = None) -> None:
        self._items: Dict[str, str] = {}
        self._ignore_blank = ignore_blank_values
        self._reserved: FrozenSet[str] = frozenset(key.lower() for key in reserved_keys)
        self._owner = owner
        for key, value in items or ():
            self.add_if_absent(key, value)

    def add_if_absent(self, key: str, value: str) -> bool:
        """Store *value* under *key* unless the key exists. Returns True if stored."""
        self._check_key(key)
        value = "" if value is None else str(value)
        if key in self._items or self._is_blank(value):
            return False
        self._items[key] = value
        return True

    def _check_key(self, key: str) -> None:
        require(key, "key", self._owner)
        if key.lower() in self._reserved:
            raise ReservedAttributeError(key, self._owner)

    def _is_blank(self, value: str) -> bool:
        return self._ignore_blank and not value.strip()

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._check_key(key)
        value = "" if value is None else str(value)
        if self._is_blank(value):
            self._items.pop(key, None)
            return
        self._items[key] = value

    def __delitem__(self, key: str) -> None:
        del self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ExtraAttributes({list(self._items.items())!r})"
