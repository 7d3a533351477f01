"""Application cache – tag-scoped caching and invalidation."""
from tagcache.application.cache.keys import join_key, merge_tag_ttl, scope, scope_digest
from tagcache.application.cache.tagged import FLUSH_BATCH_SIZE, TaggedCache
from tagcache.application.cache.invalidation import cached

__all__ = [
    "FLUSH_BATCH_SIZE",
    "TaggedCache",
    "cached",
    "join_key",
    "merge_tag_ttl",
    "scope",
    "scope_digest",
]
