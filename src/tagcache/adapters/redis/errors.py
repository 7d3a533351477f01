"""Redis adapter – translation of redis-py exceptions into ``StoreError``."""
from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

import redis

from tagcache.kernel.errors import (
    StoreCommandError,
    StoreConnectionError,
    StoreError,
    StoreTimeoutError,
)

__all__ = ["translate_error", "translate_errors"]

F = TypeVar("F", bound=Callable[..., Any])


def translate_error(command: str, exc: redis.exceptions.RedisError) -> StoreError:
    """Map a redis-py exception raised by *command* onto the store taxonomy."""
    if isinstance(exc, redis.exceptions.TimeoutError):
        return StoreTimeoutError(f"Command {command} timed out", detail={"command": command}, cause=exc)
    if isinstance(exc, redis.exceptions.ConnectionError):
        return StoreConnectionError(cause=exc)
    if isinstance(exc, redis.exceptions.ResponseError):
        return StoreCommandError(command, str(exc) or None, cause=exc)
    return StoreError(f"Caught a Redis error while running {command}", detail={"command": command}, cause=exc)


def translate_errors(command: str) -> Callable[[F], F]:
    """Decorator: re-raise redis-py errors of the wrapped call as ``StoreError``."""

    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return fn(*args, **kwargs)
            except redis.exceptions.RedisError as exc:
                raise translate_error(command, exc) from exc

        return wrapper  # type: ignore[return-value]

    return decorator
