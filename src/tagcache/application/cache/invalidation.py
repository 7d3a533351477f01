"""Application cache – @cached decorator over a TaggedCache."""
from __future__ import annotations

import functools
from typing import Any, Callable

from tagcache.application.cache.tagged import TaggedCache

__all__ = ["cached"]


def cached(
    cache: TaggedCache,
    ttl: int = 60,
    key_fn: Callable[..., str] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator: caches a function's result in *cache* via ``remember``.

    *key_fn* receives the same args/kwargs as the wrapped function.  Flushing
    any of the cache's tags invalidates every result produced through it::

        @cached(store.tags(["products"]), ttl=300)
        def product_page(product_id: int) -> bytes: ...

        product_page.cache.flush()
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            key = key_fn(*args, **kwargs) if key_fn else f"{fn.__qualname__}:{args}:{sorted(kwargs.items())}"
            return cache.remember(key, ttl, lambda: fn(*args, **kwargs))

        wrapper.cache = cache  # type: ignore[attr-defined]
        return wrapper

    return decorator
