"""Application cache – TaggedCache, a tag-scoped view over a key-value store."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from tagcache.application.cache.keys import join_key, merge_tag_ttl, scope, scope_digest
from tagcache.kernel.errors import InvalidTagSetError, InvalidTtlError, StoreError, ValidationError
from tagcache.kernel.store import Key, KeyValueStore, Value
from tagcache.observability.logging import get_logger

__all__ = ["FLUSH_BATCH_SIZE", "TaggedCache"]

T = TypeVar("T")

FLUSH_BATCH_SIZE = 500

_log = get_logger(__name__)


class TaggedCache:
    """Cache whose entries can be invalidated together by tag.

    Every value written through ``set`` is recorded in the membership set of
    each of the instance's tags before the value itself is written, so that
    ``flush`` on any of those tags always finds it.  A tag's membership set
    expires no earlier than the longest-lived value it tracks.

    Instances hold no mutable state; any number of them may share a store.

    Usage::

        users = TaggedCache(store, ["users", "tenant:42"])
        users.set("profile:7", payload, ttl=300)
        users.flush()
    """

    def __init__(self, store: KeyValueStore, tags: Iterable[str]) -> None:
        tags = tuple(tags)
        if not tags:
            raise InvalidTagSetError()
        for tag in tags:
            _check_tag(tag)
        self._store = store
        self.tags: tuple[str, ...] = tags
        self.scope = scope(tags)
        self._digest = scope_digest(self.scope)

    def __repr__(self) -> str:
        return f"TaggedCache(tags={self.tags!r})"

    @property
    def store(self) -> KeyValueStore:
        return self._store

    # ------------------------------------------------------------------
    # Key derivation
    # ------------------------------------------------------------------

    def key(self, key: str) -> str:
        """Return the store key for *key* within this tag scope."""
        return join_key(self._store.prefix, self._digest, key)

    def tag_key(self, tag: str) -> str:
        """Return the store key of the membership set for *tag*."""
        return join_key(self._store.prefix, "tag", tag, "keys")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def exists(self, key: str) -> bool:
        return self._store.exists(self.key(key))

    def get(self, key: str) -> bytes | None:
        return self._store.get(self.key(key))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set(self, key: str, value: Value, ttl: int) -> bool:
        """Store *value* under *key* for *ttl* seconds.

        Tags are linked first; if linking fails the ``StoreError`` propagates
        and the value is never written.  Returns the result of the value write.

        Raises:
            InvalidTtlError: *ttl* is not a positive ``int``.
            ValidationError: *key* is empty.
        """
        _check_key(key)
        _check_ttl(ttl)
        cache_key = self.key(key)
        self._link_tags(cache_key, ttl)
        _log.debug("tagged_cache.set", scope=self._digest, key=cache_key, ttl=ttl)
        return self._store.setex(cache_key, value, ttl)

    def remember(self, key: str, ttl: int, producer: Callable[[], T]) -> T | bytes | None:
        """Return the cached value for *key*, producing and caching it on a miss.

        On a miss the producer's own object is returned; on a hit the store
        returns the encoded ``bytes``.  So a producer returning ``"text"`` gives
        ``"text"`` the first time and ``b"text"`` afterwards.  Producers that
        return ``bytes`` see the same value either way.  Values the store
        cannot encode (``None``, ``bool``) raise ``StoreError`` after the tags
        are linked, and no value is written.

        Not atomic: concurrent callers missing at the same time may all run
        *producer*; the last write wins.  Exceptions raised by *producer*
        propagate and nothing is cached.
        """
        if self.exists(key):
            return self.get(key)

        value = producer()
        self.set(key, value, ttl)  # type: ignore[arg-type]
        return value

    def delete(self, *keys: str) -> bool:
        """Delete the given keys from this scope; ``True`` if any existed.

        Membership sets keep pointing at the deleted keys until the next
        ``flush`` or their own expiry.
        """
        if not keys:
            return False
        return self._store.delete(*(self.key(key) for key in keys)) > 0

    def flush(self) -> int:
        """Delete every key ever linked to any of this instance's tags.

        The membership sets themselves are deleted too.  This is broader than
        the instance's own scope: a key written under ``["a", "b"]`` is removed
        by flushing ``["a"]``.  Deletion runs in batches and is not
        transactional; keys deleted before a failing batch stay deleted.

        Returns the number of keys the store reported as deleted.
        """
        doomed: dict[Key, None] = {}
        for tag in self.tags:
            tag_key = self.tag_key(tag)
            for member in self._store.smembers(tag_key):
                doomed[member] = None
            doomed[tag_key] = None

        keys = list(doomed)
        deleted = 0
        for start in range(0, len(keys), FLUSH_BATCH_SIZE):
            batch = keys[start:start + FLUSH_BATCH_SIZE]
            try:
                deleted += self._store.delete(*batch)
            except StoreError:
                _log.warning(
                    "tagged_cache.flush_interrupted",
                    tags=self.tags,
                    deleted=deleted,
                    remaining=len(keys) - start,
                )
                raise

        _log.debug("tagged_cache.flush", tags=self.tags, candidates=len(keys), deleted=deleted)
        return deleted

    def _link_tags(self, cache_key: str, ttl: int) -> None:
        for tag in self.tags:
            tag_key = self.tag_key(tag)
            expiry = merge_tag_ttl(self._store.ttl(tag_key), ttl)
            self._store.sadd(tag_key, cache_key)
            self._store.expire(tag_key, expiry)


def _check_tag(tag: str) -> None:
    if not isinstance(tag, str) or not tag:
        raise InvalidTagSetError(f"Tag {tag!r} must be a non-empty string.", reason="invalid")
    try:
        tag.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidTagSetError(f"Tag {tag!r} is not encodable as UTF-8.", reason="encoding", cause=exc) from exc


def _check_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise ValidationError("Cache key must be a non-empty string", errors=[{"field": "key"}])


def _check_ttl(ttl: int) -> None:
    if isinstance(ttl, bool) or not isinstance(ttl, int) or ttl <= 0:
        raise InvalidTtlError(ttl)
