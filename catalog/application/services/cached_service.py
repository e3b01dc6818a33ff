"""Read-through / write-invalidate helpers shared by the catalog services.

Read path: cache get -> on miss (or any cache failure) repository -> populate.
Write path: repository -> exact delete of the entity key -> background
family pattern delete. Cache failures are logged and never change the
outcome; repository errors are translated into domain exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from catalog.application.interfaces.errors import AlreadyExistsError, NotFoundError
from catalog.application.interfaces.services import ICacheService, IValueCodec
from catalog.application.services.invalidation import PatternInvalidator
from catalog.core.constants import CACHE_TTL_DEFAULT
from catalog.domain.exceptions import (
    CatalogException,
    InternalErrorException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from catalog.infrastructure.cache.codec import codec_for
from catalog.infrastructure.cache.errors import (
    CacheError,
    CacheMissError,
    CacheUnavailableError,
    CodecError,
    KeyCodecError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CachedService:
    """Base class for services whose reads go through the cache.

    Subclasses set resource_type (used in not-found / already-exists
    messages) and call _read_through / _write_through once per operation.
    The service holds no per-request state.
    """

    resource_type = "resource"

    def __init__(
        self,
        cache: ICacheService | None = None,
        invalidator: PatternInvalidator | None = None,
        cache_ttl: int = CACHE_TTL_DEFAULT,
    ) -> None:
        self.cache = cache
        self.invalidator = invalidator or PatternInvalidator(cache)
        self.cache_ttl = cache_ttl

    def _key(self, builder: Callable[..., str], *args: Any) -> str:
        """Build a cache key; a rendering failure is an internal error."""
        try:
            return builder(*args)
        except KeyCodecError as e:
            logger.exception("Cache key derivation failed in %s", builder.__name__)
            raise InternalErrorException(
                "Cannot derive cache key", operation=builder.__name__
            ) from e

    async def _call_repository(
        self,
        operation: str,
        call: Callable[[], Awaitable[T]],
        resource_id: Any = None,
    ) -> T:
        """Await a repository call, translating its errors to domain exceptions."""
        try:
            return await call()
        except NotFoundError as e:
            raise ResourceNotFoundException(
                e.resource_type or self.resource_type,
                str(e.resource_id if e.resource_id is not None else resource_id),
            ) from e
        except AlreadyExistsError as e:
            raise ResourceAlreadyExistsException(
                e.resource_type or self.resource_type,
                str(e.resource_id if e.resource_id is not None else resource_id),
            ) from e
        except CatalogException:
            raise
        except Exception as e:
            logger.exception("Repository call %s failed", operation)
            raise InternalErrorException(operation=operation) from e

    async def _read_through(
        self,
        operation: str,
        key: str,
        value_type: Any,
        fetch: Callable[[], Awaitable[T]],
        resource_id: Any = None,
    ) -> T:
        """Return the cached value for key, or fetch it and populate the cache.

        Not-found and other repository errors propagate (translated) and
        leave the cache untouched.
        """
        codec: IValueCodec[T] = codec_for(value_type)
        if self.cache is not None:
            try:
                return await self.cache.get_into(key, codec)
            except CacheMissError:
                pass
            except CacheUnavailableError as e:
                logger.debug("Cache unavailable for %s, reading repository: %s", key, e)
            except (CacheError, CodecError) as e:
                logger.warning("Cache read failed for %s, treating as miss: %s", key, e)
        value = await self._call_repository(operation, fetch, resource_id)
        await self._populate(key, codec, value)
        return value

    async def _populate(self, key: str, codec: IValueCodec[T], value: T) -> None:
        if self.cache is None:
            return
        try:
            data = codec.encode(value)
        except CodecError as e:
            logger.warning("Cache encode failed for %s: %s", key, e)
            return
        try:
            await self.cache.set(key, data, self.cache_ttl)
        except CacheUnavailableError as e:
            logger.debug("Cache unavailable, not storing %s: %s", key, e)
        except CacheError as e:
            logger.warning("Cache set failed for %s: %s", key, e)

    async def _evict(self, key: str) -> None:
        # Attempted even while the cache reports itself down; the adapter
        # reconnects on delete.
        if self.cache is None:
            return
        try:
            await self.cache.delete(key)
        except CacheError as e:
            logger.warning("Cache delete failed for %s: %s", key, e)

    async def _write_through(
        self,
        operation: str,
        write: Callable[[], Awaitable[T]],
        resource_id: Any = None,
        key: str | None = None,
        pattern: str | None = None,
    ) -> T:
        """Run a repository write, then evict key and schedule the family pattern.

        The cache is only touched after the write succeeded. The pattern
        delete runs in the background and is never awaited here; it is
        scheduled even if the request is cancelled during the exact delete.
        """
        result = await self._call_repository(operation, write, resource_id)
        try:
            if key is not None:
                await self._evict(key)
        finally:
            if pattern is not None:
                self.invalidator.schedule(pattern)
        return result
