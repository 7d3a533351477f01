"""Redis adapter – RedisCache, the key-value store behind tagged caches."""
from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from types import TracebackType
from typing import TYPE_CHECKING, Any, TypeVar

import redis
from redis.client import PubSub, PubSubWorkerThread

from tagcache.adapters.redis.errors import translate_errors
from tagcache.application.cache import TaggedCache
from tagcache.kernel.errors import StoreCommandError, StoreConnectionError, StoreError
from tagcache.kernel.store import Key, Value
from tagcache.observability.logging import get_logger

if TYPE_CHECKING:
    from tagcache.config.settings import RedisSettings

__all__ = ["MessageHandler", "RedisCache"]

T = TypeVar("T")

MessageHandler = Callable[[dict[str, Any]], None]

_log = get_logger(__name__)


class RedisCache:
    """Synchronous Redis client wrapper implementing ``KeyValueStore``.

    Every command translates redis-py failures into ``StoreError`` subclasses.
    Keys are passed to Redis as given; *prefix* is only applied by the tagged
    views returned from :meth:`tags`.

    Args:
        prefix: Store-wide namespace for tagged keys.
        host, port, db, password: Redis connection parameters.
        timeout: Socket and connect timeout in seconds (``None`` blocks).
        connect: Ping the server immediately and fail fast if unreachable.
        client: Pre-built ``redis.Redis`` client, mainly for tests.
    """

    def __init__(
        self,
        prefix: str,
        host: str = "127.0.0.1",
        port: int = 6379,
        db: int = 0,
        password: str | None = None,
        timeout: float | None = None,
        *,
        connect: bool = True,
        client: redis.Redis | None = None,
    ) -> None:
        self._prefix = prefix
        self.host = host
        self.port = port
        self.db = db
        self.password = password
        self.timeout = timeout
        self._client = client if client is not None else self._create_client(db)
        self._pubsub: PubSub | None = None
        if connect:
            self.connect()

    @classmethod
    def from_settings(cls, settings: RedisSettings, **kwargs: Any) -> RedisCache:
        return cls(
            settings.key_prefix,
            host=settings.host,
            port=settings.port,
            db=settings.db,
            password=settings.password,
            timeout=settings.timeout,
            **kwargs,
        )

    def _create_client(self, db: int) -> redis.Redis:
        return redis.Redis(
            host=self.host,
            port=self.port,
            db=db,
            password=self.password,
            socket_timeout=self.timeout,
            socket_connect_timeout=self.timeout,
            decode_responses=False,
        )

    # ------------------------------------------------------------------
    # Connection
    # ------------------------------------------------------------------

    @property
    def prefix(self) -> str:
        return self._prefix

    def connect(self) -> bool:
        """Ping the server; raise ``StoreConnectionError`` when unreachable."""
        try:
            result = bool(self._client.ping())
        except redis.exceptions.RedisError as exc:
            raise StoreConnectionError(cause=exc) from exc
        _log.debug("redis.connected", host=self.host, port=self.port, db=self.db)
        return result

    def is_connected(self) -> bool:
        try:
            return self.connect()
        except StoreError:
            return False

    def select_database(self, db: int) -> None:
        """Switch every subsequent command to database *db*.

        Active pub/sub subscriptions are closed along with the old client.
        """
        client = self._create_client(db)
        try:
            client.ping()
        except redis.exceptions.RedisError as exc:
            client.close()
            raise StoreCommandError("SELECT", f"Could not select database with id {db}.", cause=exc) from exc
        previous, self._client, self.db = self._client, client, db
        self._close_pubsub()
        previous.close()

    def close(self) -> None:
        self._close_pubsub()
        self._client.close()

    def _close_pubsub(self) -> None:
        if self._pubsub is not None:
            self._pubsub.close()
            self._pubsub = None

    def __enter__(self) -> RedisCache:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Tagging
    # ------------------------------------------------------------------

    def tags(self, tags: Iterable[str]) -> TaggedCache:
        """Return a view of this store scoped to *tags*."""
        return TaggedCache(self, tags)

    def remember(self, key: Key, ttl: int, producer: Callable[[], T]) -> T | bytes | None:
        """Untagged cache-aside on a raw key; see ``TaggedCache.remember``."""
        if self.exists(key):
            return self.get(key)

        value = producer()
        self.setex(key, value, ttl)  # type: ignore[arg-type]
        return value

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    @translate_errors("GET")
    def get(self, key: Key) -> bytes | None:
        return self._client.get(key)

    @translate_errors("SET")
    def set(self, key: Key, value: Value) -> bool:
        return bool(self._client.set(key, value))

    @translate_errors("SETEX")
    def setex(self, key: Key, value: Value, ttl: int) -> bool:
        return bool(self._client.setex(key, ttl, value))

    @translate_errors("PSETEX")
    def psetex(self, key: Key, value: Value, ttl_ms: int) -> bool:
        return bool(self._client.psetex(key, ttl_ms, value))

    @translate_errors("SETNX")
    def setnx(self, key: Key, value: Value) -> bool:
        return bool(self._client.setnx(key, value))

    @translate_errors("MGET")
    def mget(self, *keys: Key) -> list[bytes | None]:
        return list(self._client.mget(keys))

    @translate_errors("INCR")
    def incr(self, key: Key) -> int:
        return self._client.incr(key)

    @translate_errors("INCRBY")
    def incrby(self, key: Key, amount: int) -> int:
        return self._client.incrby(key, amount)

    @translate_errors("DECR")
    def decr(self, key: Key) -> int:
        return self._client.decr(key)

    @translate_errors("DECRBY")
    def decrby(self, key: Key, amount: int) -> int:
        return self._client.decrby(key, amount)

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    @translate_errors("DEL")
    def delete(self, *keys: Key) -> int:
        if not keys:
            return 0
        return self._client.delete(*keys)

    @translate_errors("UNLINK")
    def unlink(self, *keys: Key) -> int:
        if not keys:
            return 0
        return self._client.unlink(*keys)

    @translate_errors("EXISTS")
    def exists(self, key: Key) -> bool:
        return self._client.exists(key) > 0

    @translate_errors("EXPIRE")
    def expire(self, key: Key, seconds: int | None) -> bool:
        if seconds is None:
            return self.persist(key)
        return bool(self._client.expire(key, seconds))

    @translate_errors("EXPIREAT")
    def expire_at(self, key: Key, when: int | datetime) -> bool:
        return bool(self._client.expireat(key, when))

    @translate_errors("PEXPIRE")
    def pexpire(self, key: Key, milliseconds: int) -> bool:
        return bool(self._client.pexpire(key, milliseconds))

    @translate_errors("PERSIST")
    def persist(self, key: Key) -> bool:
        return bool(self._client.persist(key))

    @translate_errors("TTL")
    def ttl(self, key: Key) -> int:
        return self._client.ttl(key)

    @translate_errors("PTTL")
    def pttl(self, key: Key) -> int:
        return self._client.pttl(key)

    @translate_errors("KEYS")
    def keys(self, pattern: str = "*") -> list[bytes]:
        return list(self._client.keys(pattern))

    @translate_errors("RENAME")
    def rename(self, key: Key, new_key: Key) -> bool:
        return bool(self._client.rename(key, new_key))

    @translate_errors("TOUCH")
    def touch(self, *keys: Key) -> int:
        return self._client.touch(*keys)

    @translate_errors("TYPE")
    def key_type(self, key: Key) -> str:
        kind = self._client.type(key)
        return kind.decode() if isinstance(kind, bytes) else kind

    # ------------------------------------------------------------------
    # Sets
    # ------------------------------------------------------------------

    @translate_errors("SADD")
    def sadd(self, key: Key, *members: Key) -> int:
        return self._client.sadd(key, *members)

    @translate_errors("SREM")
    def srem(self, key: Key, *members: Key) -> int:
        return self._client.srem(key, *members)

    @translate_errors("SMEMBERS")
    def smembers(self, key: Key) -> set[bytes]:
        return set(self._client.smembers(key))

    @translate_errors("SISMEMBER")
    def sismember(self, key: Key, member: Key) -> bool:
        return bool(self._client.sismember(key, member))

    @translate_errors("SCARD")
    def scard(self, key: Key) -> int:
        return self._client.scard(key)

    @translate_errors("SUNION")
    def sunion(self, *keys: Key) -> set[bytes]:
        return set(self._client.sunion(list(keys)))

    @translate_errors("SINTER")
    def sinter(self, *keys: Key) -> set[bytes]:
        return set(self._client.sinter(list(keys)))

    @translate_errors("SDIFF")
    def sdiff(self, *keys: Key) -> set[bytes]:
        return set(self._client.sdiff(list(keys)))

    # ------------------------------------------------------------------
    # Pub/Sub and server
    # ------------------------------------------------------------------

    @translate_errors("PUBLISH")
    def publish(self, channel: str, message: Value) -> int:
        return self._client.publish(channel, message)

    def _subscriber(self) -> PubSub:
        if self._pubsub is None:
            self._pubsub = self._client.pubsub(ignore_subscribe_messages=True)
        return self._pubsub

    @translate_errors("SUBSCRIBE")
    def subscribe(self, channels: Iterable[str], fn: MessageHandler) -> None:
        """Subscribe *fn* to *channels*.

        Handlers run from :meth:`get_message` or the thread started by
        :meth:`run_subscriber`, and receive redis-py's message dict.
        """
        self._subscriber().subscribe(**{channel: fn for channel in channels})

    @translate_errors("PSUBSCRIBE")
    def psubscribe(self, patterns: Iterable[str], fn: MessageHandler) -> None:
        """Subscribe *fn* to every channel matching one of *patterns*."""
        self._subscriber().psubscribe(**{pattern: fn for pattern in patterns})

    @translate_errors("UNSUBSCRIBE")
    def unsubscribe(self, channels: Iterable[str] | None = None) -> None:
        """Unsubscribe from *channels*, or from every channel when ``None``."""
        if self._pubsub is None:
            return
        self._pubsub.unsubscribe(*(channels or ()))

    @translate_errors("PUNSUBSCRIBE")
    def punsubscribe(self, patterns: Iterable[str] | None = None) -> None:
        if self._pubsub is None:
            return
        self._pubsub.punsubscribe(*(patterns or ()))

    @translate_errors("SUBSCRIBE")
    def get_message(self, timeout: float = 0.0) -> dict[str, Any] | None:
        """Read one pending message, dispatching it to its handler.

        Returns ``None`` when nothing arrived within *timeout* or when a
        handler consumed the message.
        """
        if self._pubsub is None:
            return None
        return self._pubsub.get_message(timeout=timeout)

    @translate_errors("SUBSCRIBE")
    def run_subscriber(self, sleep_time: float = 1.0) -> PubSubWorkerThread:
        """Dispatch messages on a daemon thread; stop it with ``.stop()``."""
        return self._subscriber().run_in_thread(sleep_time=sleep_time, daemon=True)

    @translate_errors("PUBSUB")
    def pubsub_channels(self, pattern: str = "*") -> list[bytes]:
        return list(self._client.pubsub_channels(pattern))

    @translate_errors("PUBSUB")
    def pubsub_numsub(self, *channels: str) -> list[tuple[bytes, int]]:
        return list(self._client.pubsub_numsub(*channels))

    @translate_errors("PUBSUB")
    def pubsub_numpat(self) -> int:
        return self._client.pubsub_numpat()

    @translate_errors("FLUSHDB")
    def flush_database(self) -> bool:
        return bool(self._client.flushdb())

    @translate_errors("FLUSHALL")
    def flush_all(self) -> bool:
        return bool(self._client.flushall())
