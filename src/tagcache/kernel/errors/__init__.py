"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       ├── InvalidTagSetError
    │       └── InvalidTtlError
    └── InfrastructureError      (infrastructure.py)
        └── StoreError
            ├── StoreConnectionError
            ├── StoreTimeoutError
            └── StoreCommandError
"""

from tagcache.kernel.errors.base import BaseError
from tagcache.kernel.errors.domain import (
    DomainError,
    InvalidTagSetError,
    InvalidTtlError,
    ValidationError,
)
from tagcache.kernel.errors.infrastructure import (
    InfrastructureError,
    StoreCommandError,
    StoreConnectionError,
    StoreError,
    StoreTimeoutError,
)

__all__ = [
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidTagSetError",
    "InvalidTtlError",
    "StoreCommandError",
    "StoreConnectionError",
    "StoreError",
    "StoreTimeoutError",
    "ValidationError",
]
