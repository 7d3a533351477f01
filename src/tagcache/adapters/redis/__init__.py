"""Redis adapter – synchronous store and error translation."""
from tagcache.adapters.redis.cache import RedisCache
from tagcache.adapters.redis.errors import translate_error, translate_errors

__all__ = ["RedisCache", "translate_error", "translate_errors"]
