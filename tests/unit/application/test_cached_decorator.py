"""Unit tests for the @cached decorator."""
from __future__ import annotations

import pytest

from tagcache.application.cache import TaggedCache, cached
from tagcache.testing.fakes import InMemoryKeyValueStore


class TestCachedDecorator:
    def test_caches_result(self, fake_store: InMemoryKeyValueStore) -> None:
        calls: list[int] = []

        @cached(TaggedCache(fake_store, ["products"]), ttl=60)
        def render(product_id: int) -> bytes:
            calls.append(product_id)
            return f"product-{product_id}".encode()

        assert render(1) == b"product-1"
        assert render(1) == b"product-1"
        assert calls == [1]

    def test_distinct_args_distinct_entries(self, fake_store: InMemoryKeyValueStore) -> None:
        @cached(TaggedCache(fake_store, ["products"]), ttl=60)
        def render(product_id: int, *, lang: str = "en") -> bytes:
            return f"{product_id}-{lang}".encode()

        assert render(1) == b"1-en"
        assert render(2) == b"2-en"
        assert render(1, lang="nl") == b"1-nl"

    def test_custom_key_fn(self, fake_store: InMemoryKeyValueStore) -> None:
        cache = TaggedCache(fake_store, ["products"])

        @cached(cache, ttl=60, key_fn=lambda product_id: f"product:{product_id}")
        def render(product_id: int) -> bytes:
            return b"page"

        render(7)
        assert cache.exists("product:7") is True

    def test_flush_through_wrapper(self, fake_store: InMemoryKeyValueStore) -> None:
        calls: list[int] = []

        @cached(TaggedCache(fake_store, ["products"]), ttl=60)
        def render(product_id: int) -> bytes:
            calls.append(product_id)
            return b"page"

        render(1)
        render.cache.flush()  # type: ignore[attr-defined]
        render(1)
        assert calls == [1, 1]

    def test_preserves_metadata(self, fake_store: InMemoryKeyValueStore) -> None:
        @cached(TaggedCache(fake_store, ["t"]))
        def documented() -> bytes:
            """Docstring."""
            return b""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."

    def test_exception_not_cached(self, fake_store: InMemoryKeyValueStore) -> None:
        attempts: list[int] = []

        @cached(TaggedCache(fake_store, ["t"]), ttl=60)
        def flaky() -> bytes:
            attempts.append(1)
            if len(attempts) == 1:
                raise ValueError("first call fails")
            return b"ok"

        with pytest.raises(ValueError):
            flaky()
        assert flaky() == b"ok"
        assert len(attempts) == 2
