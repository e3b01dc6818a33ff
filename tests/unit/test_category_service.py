"""Unit tests for CategoryService."""

import pytest

from catalog.application.dtos.category import CategoryData
from catalog.application.interfaces.errors import AlreadyExistsError, NotFoundError
from catalog.application.services import CategoryService, PatternInvalidator
from catalog.domain.exceptions import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ValidationException,
)
from tests.fakes import FakeRepository, InMemoryCache, category_page, make_category


@pytest.fixture
def service(
    repo: FakeRepository, cache: InMemoryCache, invalidator: PatternInvalidator
) -> CategoryService:
    return CategoryService(repo, cache, invalidator)


async def test_category_write_evicts_category_family(
    service: CategoryService,
    repo: FakeRepository,
    cache: InMemoryCache,
    invalidator: PatternInvalidator,
) -> None:
    hand_tools = make_category()
    repo.results.update(
        list_categories=category_page(hand_tools),
        search_categories=category_page(hand_tools),
        get_category=hand_tools,
        update_category=None,
    )
    await service.list_categories(1, 10)
    await service.search_categories("tool", 1, 10)
    await service.get_category("hand-tools")
    cache.store["items-list:1:10"] = b"[]"

    await service.update_category("hand-tools", CategoryData(title="Hand Tools"))
    await invalidator.drain(timeout=1.0)

    assert "category:hand-tools" not in cache.store
    assert "categories-list:1:10" not in cache.store
    assert "categories-search:tool:1:10" not in cache.store
    assert "items-list:1:10" in cache.store


async def test_create_category_derives_slug_from_title(
    service: CategoryService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    repo.results["create_category"] = lambda slug, data: slug

    slug = await service.create_category(CategoryData(title="Power Tools & Drills"))

    assert slug == "power-tools-drills"
    assert repo.calls[0][1][0] == "power-tools-drills"


async def test_create_category_rejects_title_without_slug_characters(
    service: CategoryService, repo: FakeRepository
) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.create_category(CategoryData(title=" -- "))

    assert exc_info.value.details == {"field": "title"}
    assert repo.calls == []


async def test_duplicate_category_maps_to_already_exists(
    service: CategoryService, repo: FakeRepository, invalidator: PatternInvalidator
) -> None:
    repo.results["create_category"] = AlreadyExistsError(resource_type="category")

    with pytest.raises(ResourceAlreadyExistsException, match="category already exists: drills"):
        await service.create_category(CategoryData(title="Drills"))
    assert invalidator.pending == 0


async def test_category_filters_are_cached(
    service: CategoryService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    filters = make_category().filters
    repo.results["list_category_filters"] = filters

    assert await service.list_category_filters("hand-tools") == filters
    assert await service.list_category_filters("hand-tools") == filters
    assert repo.count("list_category_filters") == 1
    assert "categories-filters-list:hand-tools" in cache.store


async def test_missing_category_is_not_found(
    service: CategoryService, repo: FakeRepository
) -> None:
    repo.results["get_category"] = NotFoundError(resource_type="category", resource_id="nope")

    with pytest.raises(ResourceNotFoundException):
        await service.get_category("nope")


async def test_delete_category_evicts_key(
    service: CategoryService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    cache.store["category:hand-tools"] = b"{}"
    repo.results["delete_category"] = None

    await service.delete_category("hand-tools")

    assert ("delete", "category:hand-tools") in cache.calls
    assert "category:hand-tools" not in cache.store
