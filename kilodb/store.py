"""Value containers and the shared server context that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

DEFAULT_TTL = 86400


@dataclass
class StringStore:
    """A string value."""

    value: str


@dataclass
class VectorStore:
    """A list value."""

    values: list[Any] = field(default_factory=list)


StoreValue = Union[StringStore, VectorStore]


class Context:
    """The keyspace together with its TTL slots.

    Each key refers to a value; values are kept alive only by the TTL slot
    they were placed in. When a slot is overwritten, the value it held is
    released, and any key still referring to it becomes dangling: it keeps
    counting towards size() but lookup() no longer finds it.
    """

    def __init__(self) -> None:
        self._keys: dict[str, StoreValue] = {}
        self._ttl_slots: dict[int, StoreValue] = {}

    def _is_held(self, value: StoreValue) -> bool:
        return any(held is value for held in self._ttl_slots.values())

    def lookup(self, key: str) -> StoreValue | None:
        """Return the live value of key, or None if absent or released."""
        value = self._keys.get(key)
        if value is None or not self._is_held(value):
            return None
        return value

    def put(self, key: str, value: StoreValue, ttl: int = DEFAULT_TTL) -> None:
        """Bind key to value and place value in the TTL slot ttl."""
        self._keys[key] = value
        self._ttl_slots[ttl] = value

    def remove(self, key: str) -> bool:
        """Remove key from the keyspace; return whether it was present."""
        return self._keys.pop(key, None) is not None

    def set_ttl(self, seconds: int, value: StoreValue) -> None:
        """Place value in the TTL slot seconds, replacing what it held."""
        self._ttl_slots[seconds] = value

    def clear(self) -> None:
        """Drop every key and every TTL slot."""
        self._keys.clear()
        self._ttl_slots.clear()

    def size(self) -> int:
        """Number of keys, dangling ones included."""
        return len(self._keys)