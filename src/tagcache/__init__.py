"""
tagcache – Redis caching with tag-based group invalidation.

Import path convention::

    from tagcache.adapters.redis import RedisCache
    from tagcache.application.cache import TaggedCache, cached
    from tagcache.kernel.errors import StoreError, InvalidTagSetError
    from tagcache.config import EnvSettingsLoader, RedisSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
