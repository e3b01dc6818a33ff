"""Unit tests for ItemService: read-through caching, eviction and error translation."""

import asyncio
import logging
import uuid

import pytest

from catalog.application.dtos.item import ItemData, ItemResult
from catalog.application.interfaces.errors import AlreadyExistsError, NotFoundError
from catalog.application.services import ItemService, PatternInvalidator
from catalog.domain.exceptions import (
    InternalErrorException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from catalog.infrastructure.cache import keys
from catalog.infrastructure.cache.codec import codec_for
from tests.fakes import FakeRepository, InMemoryCache, item_page, make_item


@pytest.fixture
def service(
    repo: FakeRepository, cache: InMemoryCache, invalidator: PatternInvalidator
) -> ItemService:
    return ItemService(repo, cache, invalidator, cache_ttl=600)


async def test_get_item_populates_then_serves_from_cache(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    item = make_item("Hammer")
    repo.results["get_item"] = item

    first = await service.get_item(item.id)
    second = await service.get_item(item.id)

    assert first == item
    assert second == item
    assert repo.count("get_item") == 1
    assert cache.ttls[f"item:{item.id}"] == 600


async def test_not_found_is_translated_and_not_cached(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    item_id = uuid.uuid4()
    repo.results["get_item"] = NotFoundError(resource_type="item", resource_id=item_id)

    with pytest.raises(ResourceNotFoundException) as exc_info:
        await service.get_item(item_id)

    assert exc_info.value.details == {"resource_type": "item", "resource_id": str(item_id)}
    assert cache.count("set") == 0
    assert cache.store == {}


async def test_not_found_without_details_falls_back_to_service_identity(
    service: ItemService, repo: FakeRepository
) -> None:
    item_id = uuid.uuid4()
    repo.results["get_item"] = NotFoundError()

    with pytest.raises(ResourceNotFoundException, match=f"item not found: {item_id}"):
        await service.get_item(item_id)


async def test_unexpected_repository_error_becomes_internal_error(
    service: ItemService, repo: FakeRepository, caplog
) -> None:
    boom = RuntimeError("connection reset by peer")
    repo.results["list_items"] = boom

    with caplog.at_level(logging.ERROR), pytest.raises(InternalErrorException) as exc_info:
        await service.list_items(1, 10)

    assert exc_info.value.__cause__ is boom
    assert exc_info.value.details == {"operation": "list_items"}
    assert "Repository call list_items failed" in caplog.text


async def test_cache_read_failure_falls_back_to_repository(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    page = item_page(make_item())
    repo.results["list_items"] = page
    cache.fail_on.add("get")

    assert await service.list_items(1, 10) == page
    assert repo.count("list_items") == 1


async def test_corrupt_entry_is_treated_as_miss(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    item = make_item()
    repo.results["get_item"] = item
    cache.store[f"item:{item.id}"] = b"garbage"

    assert await service.get_item(item.id) == item
    assert codec_for(ItemResult).decode(cache.store[f"item:{item.id}"]) == item


async def test_cache_set_failure_is_suppressed(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    page = item_page(make_item())
    repo.results["search_items"] = page
    cache.fail_on.add("set")

    assert await service.search_items("hammer", 1, 10) == page


async def test_unavailable_cache_falls_back_to_repository(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    page = item_page(make_item())
    repo.results["list_items"] = page
    cache.available = False

    assert await service.list_items(1, 10) == page
    assert await service.list_items(1, 10) == page

    assert repo.count("list_items") == 2
    assert cache.store == {}


async def test_service_without_cache_reads_repository() -> None:
    page = item_page(make_item())
    repo = FakeRepository(list_items=page)

    assert await ItemService(repo).list_items(1, 10) == page


async def test_category_items_with_equivalent_filters_share_one_entry(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    page = item_page(make_item("Drill"))
    repo.results["list_category_items"] = page

    await service.list_category_items(
        "drills", 1, 20, {"brand": ["acme"], "voltage": {"min": "12", "max": "18"}}, "-price"
    )
    await service.list_category_items(
        "drills", 1, 20, {"voltage": {"max": "18", "min": "12"}, "brand": ["acme"]}, "-price"
    )

    assert repo.count("list_category_items") == 1
    assert keys.items_category_key(
        "drills", 1, 20, {"brand": ["acme"], "voltage": {"min": "12", "max": "18"}}, "-price"
    ) in cache.store


async def test_unrenderable_filter_fails_before_cache_or_repository(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    with pytest.raises(InternalErrorException):
        await service.list_category_items("drills", 1, 20, {"brand": [object()]}, "")

    assert repo.calls == []
    assert cache.calls == []


async def test_hit_and_recommended_lists_use_label_queries(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    repo.results["list_items_by_label"] = item_page(make_item(labels=["hit"]))

    await service.list_hit_items(1, 10)
    await service.list_recommended_items(1, 10)

    assert [args for name, args in repo.calls] == [("hit", 1, 10), ("rec", 1, 10)]
    assert {"items-hit:1:10", "items-rec:1:10"} <= set(cache.store)


async def test_update_evicts_item_key_and_items_family(
    service: ItemService,
    repo: FakeRepository,
    cache: InMemoryCache,
    invalidator: PatternInvalidator,
) -> None:
    item = make_item("Hammer")
    updated = make_item("Claw Hammer", id=item.id)
    repo.results.update(get_item=item, list_items=item_page(item), update_item=updated)
    await service.get_item(item.id)
    await service.list_items(1, 10)
    cache.store["category:drills"] = b"{}"

    result = await service.update_item(item.id, ItemData(title="Claw Hammer", price=14.0))
    await invalidator.drain(timeout=1.0)

    assert result == updated
    assert f"item:{item.id}" not in cache.store
    assert "items-list:1:10" not in cache.store
    assert "category:drills" in cache.store

    repo.results["get_item"] = updated
    assert await service.get_item(item.id) == updated


async def test_family_eviction_does_not_block_the_write(
    service: ItemService,
    repo: FakeRepository,
    cache: InMemoryCache,
    invalidator: PatternInvalidator,
) -> None:
    item = make_item()
    repo.results.update(list_items=item_page(item), delete_item=None)
    await service.list_items(1, 10)
    cache.pattern_gate = asyncio.Event()

    await service.delete_item(item.id)

    assert invalidator.pending == 1
    assert "items-list:1:10" in cache.store
    cache.pattern_gate.set()
    await invalidator.drain(timeout=1.0)
    assert "items-list:1:10" not in cache.store


async def test_failed_write_leaves_cache_untouched(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache, invalidator: PatternInvalidator
) -> None:
    item_id = uuid.uuid4()
    cache.store[f"item:{item_id}"] = b"{}"
    repo.results["delete_item"] = NotFoundError(resource_type="item", resource_id=item_id)

    with pytest.raises(ResourceNotFoundException):
        await service.delete_item(item_id)

    assert f"item:{item_id}" in cache.store
    assert invalidator.pending == 0
    assert cache.count("delete") == 0


async def test_create_item_schedules_family_only(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache, invalidator: PatternInvalidator
) -> None:
    created = make_item("Saw")
    repo.results["create_item"] = created

    assert await service.create_item(ItemData(title="Saw", price=30.0)) == created
    await invalidator.drain(timeout=1.0)

    assert cache.count("delete") == 0
    assert ("delete_pattern", "items-*") in cache.calls
    assert f"item:{created.id}" not in cache.store


async def test_create_conflict_maps_to_already_exists(
    service: ItemService, repo: FakeRepository
) -> None:
    repo.results["create_item"] = AlreadyExistsError(resource_type="item", resource_id="Saw")

    with pytest.raises(ResourceAlreadyExistsException):
        await service.create_item(ItemData(title="Saw", price=30.0))


async def test_evict_failure_does_not_fail_the_write(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    updated = make_item()
    repo.results["update_item"] = updated
    cache.fail_on.add("delete")

    assert await service.update_item(updated.id, ItemData(title="x", price=1.0)) == updated


async def test_related_items_are_cached_per_item(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    item_id = uuid.uuid4()
    repo.results["list_related_items"] = []

    assert await service.list_related_items(item_id) == []
    assert f"items-related:{item_id}" in cache.store


async def test_prepopulated_item_is_returned_without_repository_call(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    item_id = uuid.UUID("11111111-1111-1111-1111-111111111111")
    item = make_item("A", 10.0, id=item_id)
    cache.store[f"item:{item_id}"] = codec_for(ItemResult).encode(item)

    assert await service.get_item(item_id) == item
    assert repo.calls == []


async def test_insertion_order_of_filters_does_not_split_the_cache(
    service: ItemService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    repo.results["list_category_items"] = item_page(make_item("Wrench"))
    first = {"price": {"min": "10", "max": "20"}, "brand": ["x", "y"]}
    second = {"brand": ["x", "y"], "price": {"max": "20", "min": "10"}}

    await service.list_category_items("tools", 1, 10, first, "name")
    await service.list_category_items("tools", 1, 10, second, "name")

    assert repo.count("list_category_items") == 1
    assert list(cache.store) == ["items-category:tools:1:10:{brand=[x,y],price={min=10,max=20}}:name"]


async def test_writes_still_invalidate_while_cache_reports_unavailable(
    service: ItemService,
    repo: FakeRepository,
    cache: InMemoryCache,
    invalidator: PatternInvalidator,
    caplog,
) -> None:
    item = make_item()
    repo.results["update_item"] = item
    cache.available = False

    with caplog.at_level(logging.WARNING):
        assert await service.update_item(item.id, ItemData(title="x", price=1.0)) == item
        await invalidator.drain(timeout=1.0)

    assert ("delete", f"item:{item.id}") in cache.calls
    assert ("delete_pattern", "items-*") in cache.calls
    assert "Cache invalidation failed for pattern items-*" in caplog.text


async def test_cancelled_request_still_schedules_family_eviction(
    service: ItemService,
    repo: FakeRepository,
    cache: InMemoryCache,
    invalidator: PatternInvalidator,
) -> None:
    item = make_item()
    repo.results.update(list_items=item_page(item), update_item=item)
    await service.list_items(1, 10)
    cache.delete_gate = asyncio.Event()

    request = asyncio.create_task(
        service.update_item(item.id, ItemData(title="x", price=1.0))
    )
    while cache.count("delete") == 0:
        await asyncio.sleep(0)
    request.cancel()
    with pytest.raises(asyncio.CancelledError):
        await request
    await invalidator.drain(timeout=1.0)

    assert repo.count("update_item") == 1
    assert ("delete_pattern", "items-*") in cache.calls
    assert "items-list:1:10" not in cache.store


async def test_forged_filter_value_does_not_poison_the_real_listing(
    service: ItemService, repo: FakeRepository
) -> None:
    real_page = item_page(make_item("Drill"))
    repo.results["list_category_items"] = lambda slug, page, size, filters, sort: (
        real_page if "b" in filters else item_page()
    )

    await service.list_category_items("tools", 1, 10, {"a": {"min": "1},b={max=2"}}, "")
    result = await service.list_category_items(
        "tools", 1, 10, {"a": {"min": "1"}, "b": {"max": "2"}}, ""
    )

    assert result == real_page
    assert repo.count("list_category_items") == 2
