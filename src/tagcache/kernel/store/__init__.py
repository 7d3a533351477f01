"""Kernel store – key-value store ports."""
from tagcache.kernel.store.ports import (
    TTL_MISSING,
    TTL_PERSISTENT,
    Key,
    KeyValueStore,
    SetOps,
    TtlOps,
    Value,
    ValueOps,
)

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
