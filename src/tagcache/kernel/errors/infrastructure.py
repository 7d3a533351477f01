"""Infrastructure errors – failures surfaced by the key-value store."""

from __future__ import annotations

from typing import Any

from tagcache.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a caller mistake."""

    default_code = "infrastructure_error"


class StoreError(InfrastructureError):
    """The key-value store failed to execute a command."""

    default_code = "store_error"


class StoreConnectionError(StoreError):
    """Could not connect to the store, or the connection was lost."""

    default_code = "store_connection_failed"

    def __init__(self, message: str = "Could not connect to Redis.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class StoreTimeoutError(StoreError):
    """A store round-trip exceeded its socket timeout."""

    default_code = "store_timeout"


class StoreCommandError(StoreError):
    """The store rejected a command."""

    default_code = "store_command_failed"

    def __init__(self, command: str, reason: str | None = None, **kwargs: Any) -> None:
        if reason is not None:
            message = f"Command {command} failed with reason: {reason}"
        else:
            message = f"Command {command} failed without a reason."
        super().__init__(message, detail={"command": command}, **kwargs)
        self.command = command
        self.reason = reason


__all__ = [
    "InfrastructureError",
    "StoreCommandError",
    "StoreConnectionError",
    "StoreError",
    "StoreTimeoutError",
]
