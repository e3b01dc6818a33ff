"""Unit tests for RedisCache (Redis client mocked)."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError

from catalog.application.dtos.item import ItemResult
from catalog.core.config import Settings
from catalog.infrastructure.cache import RedisCache
from catalog.infrastructure.cache.codec import codec_for
from catalog.infrastructure.cache.errors import (
    CacheError,
    CacheMissError,
    CacheUnavailableError,
)
from tests.fakes import make_item


def _settings(**overrides: object) -> Settings:
    return Settings(
        database_url="postgresql+asyncpg://u:p@localhost/test",
        **overrides,
    )


async def _connected(client: AsyncMock, **settings: object) -> RedisCache:
    cache = RedisCache(redis_client=client, settings=_settings(**settings))
    await cache.connect()
    return cache


async def test_connect_pings_injected_client() -> None:
    client = AsyncMock()
    cache = await _connected(client)

    client.ping.assert_awaited_once()
    assert cache.is_available() is True


async def test_failed_connect_leaves_cache_unavailable() -> None:
    client = AsyncMock()
    client.ping.side_effect = RedisConnectionError("refused")
    cache = await _connected(client)

    assert cache.is_available() is False
    with pytest.raises(CacheUnavailableError):
        await cache.get_into("item:1", codec_for(ItemResult))
    # Within the reconnect interval reads do not ping again.
    assert client.ping.await_count == 1


async def test_get_into_raises_miss_for_absent_key() -> None:
    client = AsyncMock()
    client.get.return_value = None
    cache = await _connected(client)

    with pytest.raises(CacheMissError) as exc_info:
        await cache.get_into("item:1", codec_for(ItemResult))
    assert exc_info.value.key == "item:1"


async def test_get_into_decodes_stored_bytes() -> None:
    item = make_item("Hammer")
    client = AsyncMock()
    client.get.return_value = codec_for(ItemResult).encode(item)
    cache = await _connected(client)

    assert await cache.get_into(f"item:{item.id}", codec_for(ItemResult)) == item


async def test_set_uses_setex_with_ttl() -> None:
    client = AsyncMock()
    cache = await _connected(client)

    await cache.set("items-list:1:10", b"{}", 3600)

    client.setex.assert_awaited_once_with("items-list:1:10", 3600, b"{}")


async def test_delete_removes_exact_key() -> None:
    client = AsyncMock()
    cache = await _connected(client)

    await cache.delete("item:1")

    client.delete.assert_awaited_once_with("item:1")


async def test_operation_retries_once_after_reconnect() -> None:
    client = AsyncMock()
    client.get.side_effect = [RedisConnectionError("reset"), None]
    cache = await _connected(client)

    with pytest.raises(CacheMissError):
        await cache.get_into("item:1", codec_for(ItemResult))

    assert client.get.await_count == 2
    assert client.ping.await_count == 2
    assert cache.is_available() is True


async def test_failed_reconnect_is_retried_on_a_later_call() -> None:
    client = AsyncMock()
    cache = await _connected(client, redis_reconnect_interval=0)
    client.get.side_effect = RedisConnectionError("reset")
    client.ping.side_effect = RedisConnectionError("refused")

    with pytest.raises(CacheUnavailableError):
        await cache.get_into("item:1", codec_for(ItemResult))
    assert cache.is_available() is False

    client.ping.side_effect = None
    client.get.side_effect = None
    client.get.return_value = None
    with pytest.raises(CacheMissError):
        await cache.get_into("item:1", codec_for(ItemResult))
    assert cache.is_available() is True


async def test_startup_outage_recovers_once_redis_answers() -> None:
    client = AsyncMock()
    client.ping.side_effect = [RedisConnectionError("refused"), None]
    cache = await _connected(client, redis_reconnect_interval=0)
    assert cache.is_available() is False

    await cache.set("items-list:1:10", b"[]", 60)

    client.setex.assert_awaited_once_with("items-list:1:10", 60, b"[]")
    assert cache.is_available() is True


async def test_delete_reconnects_even_inside_the_interval() -> None:
    client = AsyncMock()
    client.ping.side_effect = [None, RedisConnectionError("refused"), None]
    client.get.side_effect = RedisConnectionError("reset")
    cache = await _connected(client, redis_reconnect_interval=3600)

    with pytest.raises(CacheUnavailableError):
        await cache.get_into("item:1", codec_for(ItemResult))
    assert cache.is_available() is False
    with pytest.raises(CacheUnavailableError):
        await cache.set("item:1", b"{}", 60)
    client.setex.assert_not_awaited()

    await cache.delete("item:1")

    client.delete.assert_awaited_once_with("item:1")
    assert cache.is_available() is True


async def test_other_redis_errors_become_cache_errors() -> None:
    client = AsyncMock()
    client.setex.side_effect = ResponseError("OOM command not allowed")
    cache = await _connected(client)

    with pytest.raises(CacheError, match="set failed"):
        await cache.set("item:1", b"{}", 60)


async def test_delete_pattern_scans_and_unlinks_in_chunks() -> None:
    matched = [b"items-list:1:10", b"items-list:2:10", b"items-search:a:1:10"]

    async def scan_iter(match: str, count: int):
        assert match == "items-*"
        assert count == 2
        for key in matched:
            yield key

    client = AsyncMock()
    client.scan_iter = scan_iter
    client.unlink.side_effect = lambda *keys: len(keys)
    cache = await _connected(client, cache_scan_batch_size=2)

    deleted = await cache.delete_pattern("items-*")

    assert deleted == 3
    assert [call.args for call in client.unlink.await_args_list] == [
        (b"items-list:1:10", b"items-list:2:10"),
        (b"items-search:a:1:10",),
    ]


async def test_delete_pattern_with_no_matches_unlinks_nothing() -> None:
    async def scan_iter(match: str, count: int):
        return
        yield

    client = AsyncMock()
    client.scan_iter = scan_iter
    cache = await _connected(client)

    assert await cache.delete_pattern("promos-*") == 0
    client.unlink.assert_not_awaited()


async def test_close_releases_client() -> None:
    client = AsyncMock()
    cache = await _connected(client)

    await cache.close()

    client.aclose.assert_awaited_once()
    assert cache.is_available() is False
