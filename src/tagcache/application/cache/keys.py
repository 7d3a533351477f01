"""Application cache – scope and key derivation for tagged caches.

Key layout::

    {prefix}:{sha1(scope)}:{user_key}     cached value
    {prefix}:tag:{tag}:keys               membership set of one tag

The scope is the tags joined with ``|`` in the order given.  Tags are neither
sorted nor deduplicated, so ``["a", "b"]`` and ``["b", "a"]`` address different
values while still sharing the same membership sets.
"""
from __future__ import annotations

import hashlib
from collections.abc import Iterable

__all__ = [
    "KEY_SEPARATOR",
    "TAG_SEPARATOR",
    "join_key",
    "merge_tag_ttl",
    "scope",
    "scope_digest",
]

KEY_SEPARATOR = ":"
TAG_SEPARATOR = "|"


def scope(tags: Iterable[str]) -> str:
    return TAG_SEPARATOR.join(tags)


def scope_digest(value: str) -> str:
    """SHA-1 hex digest of a scope; a namespacing token, not a security boundary."""
    return hashlib.sha1(value.encode("utf-8")).hexdigest()  # noqa: S324


def join_key(*parts: str) -> str:
    return KEY_SEPARATOR.join(parts)


def merge_tag_ttl(current: int, requested: int) -> int | None:
    """Return the expiry a tag key must get so it outlives its members.

    *current* is the tag key's remaining ttl as reported by the store
    (``-1`` persistent, ``-2`` missing).  The larger of both wins; a negative
    result means the tag key stays persistent and is returned as ``None``.
    """
    merged = max(current, requested)
    if merged < 0:
        return None
    return merged
