"""Kernel store – key-value store ports consumed by the cache layer.

The store is split into small capability protocols so that callers depend only
on the commands they actually issue.  Keys may come back from the store as
``bytes`` (set members read from Redis), so every key argument accepts both.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

Key = str | bytes
Value = bytes | str | int | float

# Sentinels returned by ``TtlOps.ttl``
TTL_PERSISTENT = -1
TTL_MISSING = -2


@runtime_checkable
class ValueOps(Protocol):
    def get(self, key: Key) -> bytes | None: ...
    def setex(self, key: Key, value: Value, ttl: int) -> bool: ...
    def delete(self, *keys: Key) -> int: ...
    def exists(self, key: Key) -> bool: ...


@runtime_checkable
class SetOps(Protocol):
    def sadd(self, key: Key, *members: Key) -> int: ...
    def smembers(self, key: Key) -> set[bytes] | set[str]: ...


@runtime_checkable
class TtlOps(Protocol):
    def ttl(self, key: Key) -> int:
        """Remaining seconds, ``TTL_PERSISTENT`` or ``TTL_MISSING``."""
        ...

    def expire(self, key: Key, seconds: int | None) -> bool:
        """Set the key's expiry; ``None`` makes the key persistent."""
        ...


@runtime_checkable
class KeyValueStore(ValueOps, SetOps, TtlOps, Protocol):
    """Port: everything a tagged cache needs from its store."""

    @property
    def prefix(self) -> str: ...


__all__ = [
    "TTL_MISSING",
    "TTL_PERSISTENT",
    "Key",
    "KeyValueStore",
    "SetOps",
    "TtlOps",
    "Value",
    "ValueOps",
]
