"""Config settings – RedisSettings."""
from __future__ import annotations

import dataclasses

from tagcache.config.settings.base import Settings
from tagcache.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class RedisSettings(Settings):
    """Connection settings for :class:`~tagcache.adapters.redis.RedisCache`.

    Loaded from ``REDIS_*`` environment variables, e.g. ``REDIS_HOST``,
    ``REDIS_KEY_PREFIX``.
    """

    _prefix: dataclasses.ClassVar[str] = "REDIS"

    key_prefix: str = "tagcache"
    host: str = "127.0.0.1"
    port: int = 6379
    db: int = 0
    password: str | None = None
    timeout: float | None = None

    def _validate(self) -> None:
        if not self.key_prefix:
            raise InvalidSettingValueError("key_prefix", self.key_prefix, "must not be empty")
        if ":" in self.key_prefix:
            raise InvalidSettingValueError("key_prefix", self.key_prefix, "must not contain ':'")
        if not 1 <= self.port <= 65535:
            raise InvalidSettingValueError("port", self.port, "must be between 1 and 65535")
        if self.db < 0:
            raise InvalidSettingValueError("db", self.db, "must not be negative")
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")


__all__ = ["RedisSettings"]
