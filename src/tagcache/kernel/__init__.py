"""Kernel – framework-agnostic building blocks: errors, clocks, store ports."""

from tagcache.kernel.errors import (
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidTagSetError,
    InvalidTtlError,
    StoreCommandError,
    StoreConnectionError,
    StoreError,
    StoreTimeoutError,
    ValidationError,
)
from tagcache.kernel.store import KeyValueStore
from tagcache.kernel.time import Clock, FrozenClock, SystemClock

__all__ = [
    "BaseError",
    "Clock",
    "DomainError",
    "FrozenClock",
    "InfrastructureError",
    "InvalidTagSetError",
    "InvalidTtlError",
    "KeyValueStore",
    "StoreCommandError",
    "StoreConnectionError",
    "StoreError",
    "StoreTimeoutError",
    "SystemClock",
    "ValidationError",
]
