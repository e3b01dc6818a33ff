"""Redis-backed implementation of the cache port (ICacheService).

Async Redis client storing opaque bytes with a TTL. Unlike a best-effort
cache, every operation reports failure by raising: CacheMissError for an
absent key, CacheUnavailableError when no connection is usable, CacheError
for any other transport failure. The services decide what to suppress.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import redis.asyncio as redis

from catalog.application.interfaces.services import IValueCodec
from catalog.core.config import Settings, get_settings
from catalog.infrastructure.cache.errors import (
    CacheError,
    CacheMissError,
    CacheUnavailableError,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")


class RedisCache:
    """Async Redis cache with TTL, exact delete and SCAN-based pattern delete.

    Uses catalog.core.config for connection settings. Call connect() at
    startup and close() at shutdown. Safe for concurrent use by many
    request tasks (redis-py pools connections).
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize cache.

        Args:
            redis_client: Optional Redis client for testing or DI.
            settings: Optional settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()
        self._connected = False
        self._last_reconnect = float("-inf")

    async def connect(self) -> None:
        """Establish (or verify) the Redis connection. Call on app startup.

        A failed connect leaves the cache unavailable; it never raises.
        """
        if self.redis is None:
            password = self.settings.redis_password
            self.redis = redis.Redis(
                host=self.settings.redis_host,
                port=self.settings.redis_port,
                db=self.settings.redis_db,
                password=password.get_secret_value() if password else None,
                decode_responses=False,
                socket_timeout=self.settings.redis_socket_timeout,
                socket_connect_timeout=self.settings.redis_socket_timeout,
                socket_keepalive=True,
            )
        self._last_reconnect = time.monotonic()
        try:
            await self.redis.ping()
            self._connected = True
            logger.info(
                "Redis cache connected: %s:%s",
                self.settings.redis_host,
                self.settings.redis_port,
            )
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning(
                "Redis connection failed: %s. Cache unavailable until a reconnect succeeds.", e
            )
            self._connected = False

    async def close(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Ping the server once; return True if the connection is usable again."""
        if self.redis is None:
            return False
        self._last_reconnect = time.monotonic()
        try:
            await self.redis.ping()
        except (redis.ConnectionError, redis.TimeoutError):
            self._connected = False
            return False
        if not self._connected:
            logger.info("Redis cache reconnected")
        self._connected = True
        return True

    def _reconnect_due(self) -> bool:
        elapsed = time.monotonic() - self._last_reconnect
        return elapsed >= self.settings.redis_reconnect_interval

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def _execute(
        self,
        operation: str,
        target: str,
        call: Callable[[redis.Redis], Awaitable[R]],
        always_reconnect: bool = False,
    ) -> R:
        """Run call against the client, retrying once after a dropped connection.

        While disconnected, a call first pings the server: at most once per
        redis_reconnect_interval, or every time when always_reconnect is set
        (deletes, so no write skips its invalidation).

        Raises:
            CacheUnavailableError: If no connection is usable.
            CacheError: On any other Redis failure.
        """
        if self.redis is None:
            raise CacheUnavailableError(f"Cache {operation} unavailable for {target}")
        if not self._connected:
            if not (always_reconnect or self._reconnect_due()) or not await self._reconnect():
                raise CacheUnavailableError(f"Cache {operation} unavailable for {target}")
        try:
            return await call(self.redis)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            if not await self._reconnect():
                raise CacheUnavailableError(
                    f"Cache {operation} unavailable for {target} (Redis disconnected)"
                ) from e
            try:
                return await call(self.redis)
            except redis.RedisError as retry_error:
                raise CacheError(
                    f"Cache {operation} failed for {target} after reconnect"
                ) from retry_error
        except redis.RedisError as e:
            raise CacheError(f"Cache {operation} failed for {target}: {e}") from e

    async def get_into(self, key: str, codec: IValueCodec[T]) -> T:
        """Fetch key and decode it with codec.

        Raises:
            CacheMissError: If key is absent or expired.
            ValueDecodeError: If the stored bytes do not decode.
            CacheError: On transport failure.
        """
        raw: Any = await self._execute("get", key, lambda client: client.get(key))
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            raise CacheMissError(key)
        logger.debug("Cache HIT: %s", key)
        return codec.decode(raw)

    async def set(self, key: str, value: bytes, ttl: int) -> None:
        """Store value with TTL in seconds (SETEX, overwrites)."""
        await self._execute("set", key, lambda client: client.setex(key, ttl, value))
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    async def delete(self, key: str) -> None:
        """Remove key from cache. Absent keys are not an error."""
        await self._execute(
            "delete", key, lambda client: client.delete(key), always_reconnect=True
        )
        logger.debug("Cache DELETE: %s", key)

    async def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching pattern using SCAN + batched UNLINK (non-blocking).

        Uses scan_iter to avoid KEYS blocking; collects keys in chunks of
        cache_scan_batch_size and UNLINKs each chunk so memory is reclaimed
        asynchronously on the server. Keys written during the pass may or may
        not be seen. A dropped connection restarts the pass once.

        Args:
            pattern: Redis glob pattern (e.g. items-*).

        Returns:
            Number of keys deleted.
        """
        batch_size = self.settings.cache_scan_batch_size

        async def _scan_and_unlink(client: redis.Redis) -> int:
            deleted = 0
            chunk: list[bytes] = []
            async for key in client.scan_iter(match=pattern, count=batch_size):
                chunk.append(key)
                if len(chunk) >= batch_size:
                    deleted += int(await client.unlink(*chunk) or 0)
                    chunk = []
            if chunk:
                deleted += int(await client.unlink(*chunk) or 0)
            return deleted

        deleted = await self._execute(
            "delete_pattern", pattern, _scan_and_unlink, always_reconnect=True
        )
        logger.info("Cache INVALIDATE: %s (%s keys)", pattern, deleted)
        return deleted
