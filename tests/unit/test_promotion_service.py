"""Unit tests for PromotionService."""

from datetime import UTC, datetime

import pytest

from catalog.application.dtos.promotion import PromotionData
from catalog.application.interfaces.errors import NotFoundError
from catalog.application.services import PatternInvalidator, PromotionService
from catalog.domain.exceptions import ResourceNotFoundException, ValidationException
from tests.fakes import (
    FakeRepository,
    InMemoryCache,
    make_item,
    make_promotion,
    promotion_item_page,
)

SPRING = PromotionData(
    title="Spring Sale",
    description="Up to 30% off",
    src="/img/spring.png",
    lasts_to=datetime(2026, 5, 31, tzinfo=UTC),
)


@pytest.fixture
def service(
    repo: FakeRepository, cache: InMemoryCache, invalidator: PatternInvalidator
) -> PromotionService:
    return PromotionService(repo, cache, invalidator)


async def test_update_promotion_evicts_entity_and_family(
    service: PromotionService,
    repo: FakeRepository,
    cache: InMemoryCache,
    invalidator: PatternInvalidator,
) -> None:
    promotion = make_promotion()
    renamed = make_promotion(title="Spring Mega Sale")
    repo.results.update(get_promotion=promotion, update_promotion=renamed)
    await service.get_promotion("spring-sale")
    cache.store["promos-list:1:10"] = b"[]"
    cache.store["promos-search:spring:1:10"] = b"[]"

    result = await service.update_promotion("spring-sale", SPRING)
    await invalidator.drain(timeout=1.0)

    assert result == renamed
    assert not [k for k in cache.store if k.startswith(("promo:", "promos-"))]

    repo.results["get_promotion"] = renamed
    assert await service.get_promotion("spring-sale") == renamed
    assert repo.count("get_promotion") == 2


async def test_promotion_items_live_in_the_items_family(
    service: PromotionService,
    repo: FakeRepository,
    cache: InMemoryCache,
    invalidator: PatternInvalidator,
) -> None:
    page = promotion_item_page("spring-sale", make_item())
    repo.results.update(list_promotion_items=page, delete_promotion=None)

    assert await service.list_promotion_items("spring-sale", 1, 10) == page
    assert "items-promos:spring-sale:1:10" in cache.store

    await service.delete_promotion("spring-sale")
    await invalidator.drain(timeout=1.0)
    assert ("delete_pattern", "promos-*") in cache.calls


async def test_create_promotion_returns_slug(
    service: PromotionService, repo: FakeRepository
) -> None:
    repo.results["create_promotion"] = lambda slug, data: slug

    assert await service.create_promotion(SPRING) == "spring-sale"


async def test_create_promotion_rejects_blank_slug(
    service: PromotionService, repo: FakeRepository
) -> None:
    blank = PromotionData(
        title="!!!", description="", src="", lasts_to=datetime(2026, 1, 1, tzinfo=UTC)
    )

    with pytest.raises(ValidationException):
        await service.create_promotion(blank)
    assert repo.calls == []


async def test_unknown_promotion_is_not_cached(
    service: PromotionService, repo: FakeRepository, cache: InMemoryCache
) -> None:
    repo.results["get_promotion"] = NotFoundError(resource_type="promotion", resource_id="ghost")

    for _ in range(2):
        with pytest.raises(ResourceNotFoundException):
            await service.get_promotion("ghost")

    assert repo.count("get_promotion") == 2
    assert "promo:ghost" not in cache.store
    assert cache.count("set") == 0
