"""Ordered string-to-string mapping serialised as a list of key/value pairs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any


class KeyValues(MutableMapping):
    """String mapping iterated in key order and serialised as ``[{"key", "value"}]``."""

    __slots__ = ("_data",)

    def __init__(self, items: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._data: dict[str, str] = {}
        if items is not None:
            self.update(items)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError("keys and values must be strings")
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"KeyValues({dict(self.items())!r})"

    def copy(self) -> KeyValues:
        return KeyValues(self)

    def to_list(self) -> list[dict[str, str]]:
        """Return the pairs as a list of ``{"key": ..., "value": ...}`` objects."""
        return [{"key": key, "value": value} for key, value in self.items()]

    @classmethod
    def from_list(cls, items: Any) -> KeyValues:
        """Build a mapping from a list of ``{"key": ..., "value": ...}`` objects."""
        if not isinstance(items, list):
            raise ValueError("key/value pairs must be given as a list")
        result = cls()
        for item in items:
            if not isinstance(item, Mapping) or "key" not in item or "value" not in item:
                raise ValueError(f"invalid key/value pair: {item!r}")
            key, value = item["key"], item["value"]
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValueError(f"key and value must be strings: {item!r}")
            result[key] = value
        return result