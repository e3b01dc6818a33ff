"""HTTP tests for the catalog API with services wired to in-memory fakes."""

import uuid

import pytest
from httpx import AsyncClient

from catalog.api.v1.dependencies import (
    get_cache,
    get_category_service,
    get_favorite_service,
    get_item_service,
    get_order_service,
)
from catalog.application.interfaces.errors import AlreadyExistsError, NotFoundError
from catalog.application.services import (
    CategoryService,
    FavoriteService,
    ItemService,
    OrderService,
    PatternInvalidator,
)
from catalog.main import app
from tests.fakes import FakeRepository, InMemoryCache, item_page, make_item, order_page

USER_ID = "0b7f5e9c-1d2a-4c3b-8e4f-5a6b7c8d9e0f"


@pytest.fixture
def item_repo(
    repo: FakeRepository, cache: InMemoryCache, invalidator: PatternInvalidator
) -> FakeRepository:
    service = ItemService(repo, cache, invalidator)
    app.dependency_overrides[get_item_service] = lambda: service
    return repo


async def test_health_reports_disabled_cache(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "cache": "disabled"}


async def test_health_reports_unavailable_cache(
    client: AsyncClient, cache: InMemoryCache
) -> None:
    cache.available = False
    app.dependency_overrides[get_cache] = lambda: cache

    response = await client.get("/api/v1/health")

    assert response.json()["cache"] == "unavailable"


async def test_get_item_is_served_from_cache_on_repeat(
    client: AsyncClient, item_repo: FakeRepository
) -> None:
    item = make_item("Hammer")
    item_repo.results["get_item"] = item

    first = await client.get(f"/api/v1/items/{item.id}")
    second = await client.get(f"/api/v1/items/{item.id}")

    assert first.status_code == 200
    assert first.json()["title"] == "Hammer"
    assert second.json() == first.json()
    assert item_repo.count("get_item") == 1


async def test_missing_item_returns_404(client: AsyncClient, item_repo: FakeRepository) -> None:
    item_id = uuid.uuid4()
    item_repo.results["get_item"] = NotFoundError(resource_type="item", resource_id=item_id)

    response = await client.get(f"/api/v1/items/{item_id}")

    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"
    assert response.json()["details"]["resource_id"] == str(item_id)


async def test_repository_failure_returns_500_without_details(
    client: AsyncClient, item_repo: FakeRepository
) -> None:
    item_repo.results["list_items"] = RuntimeError("db down")

    response = await client.get("/api/v1/items")

    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_ERROR"
    assert response.json()["details"] == {}


async def test_page_size_above_maximum_is_rejected(
    client: AsyncClient, item_repo: FakeRepository
) -> None:
    response = await client.get("/api/v1/items", params={"size": 1000})

    assert response.status_code == 400
    assert response.json()["details"] == {"field": "size"}
    assert item_repo.calls == []


async def test_default_page_size_applies(client: AsyncClient, item_repo: FakeRepository) -> None:
    item_repo.results["list_items"] = item_page()

    response = await client.get("/api/v1/items")

    assert response.status_code == 200
    assert item_repo.calls == [("list_items", (1, 40))]


async def test_create_item_returns_201(client: AsyncClient, item_repo: FakeRepository) -> None:
    created = make_item("Saw", 30.0)
    item_repo.results["create_item"] = created

    response = await client.post(
        "/api/v1/items", json={"title": " Saw ", "price": 30.0, "labels": [" HIT "]}
    )

    assert response.status_code == 201
    assert response.json()["id"] == str(created.id)
    data = item_repo.calls[0][1][0]
    assert data.title == "Saw"
    assert data.labels == ["hit"]


async def test_invalid_item_body_returns_422(
    client: AsyncClient, item_repo: FakeRepository
) -> None:
    response = await client.post("/api/v1/items", json={"title": "Saw", "price": -1})

    assert response.status_code == 422
    assert item_repo.calls == []


async def test_delete_item_returns_204(client: AsyncClient, item_repo: FakeRepository) -> None:
    item_repo.results["delete_item"] = None

    response = await client.delete(f"/api/v1/items/{uuid.uuid4()}")

    assert response.status_code == 204


async def test_category_items_parse_filters_and_sort(
    client: AsyncClient, item_repo: FakeRepository
) -> None:
    item_repo.results["list_category_items"] = item_page(make_item("Drill"))

    response = await client.get(
        "/api/v1/categories/drills/items",
        params=[
            ("filter[brand]", "acme,globex"),
            ("filter[voltage][min]", "12"),
            ("max_price", "99.5"),
            ("sort", "-price"),
            ("size", "20"),
        ],
    )

    assert response.status_code == 200
    assert item_repo.calls == [
        (
            "list_category_items",
            (
                "drills",
                1,
                20,
                {"brand": ["acme", "globex"], "voltage": {"min": "12"}, "max_price": 99.5},
                "-price",
            ),
        )
    ]


async def test_malformed_category_filter_returns_400(
    client: AsyncClient, item_repo: FakeRepository
) -> None:
    response = await client.get(
        "/api/v1/categories/drills/items", params={"filter[brand][step]": "1"}
    )

    assert response.status_code == 400
    assert item_repo.calls == []


async def test_price_named_filter_returns_400(
    client: AsyncClient, item_repo: FakeRepository
) -> None:
    response = await client.get(
        "/api/v1/categories/drills/items",
        params=[("min_price", "10"), ("filter[min_price]", "x")],
    )

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"
    assert item_repo.calls == []


async def test_create_category_returns_slug(
    client: AsyncClient, repo: FakeRepository, cache: InMemoryCache
) -> None:
    service = CategoryService(repo, cache)
    app.dependency_overrides[get_category_service] = lambda: service
    repo.results["create_category"] = lambda slug, data: slug

    response = await client.post("/api/v1/categories", json={"title": "Power Tools"})

    assert response.status_code == 201
    assert response.json() == {"slug": "power-tools"}


async def test_duplicate_category_returns_409(
    client: AsyncClient, repo: FakeRepository, cache: InMemoryCache
) -> None:
    service = CategoryService(repo, cache)
    app.dependency_overrides[get_category_service] = lambda: service
    repo.results["create_category"] = AlreadyExistsError(resource_type="category")

    response = await client.post("/api/v1/categories", json={"title": "Drills"})

    assert response.status_code == 409
    assert response.json()["error"] == "RESOURCE_ALREADY_EXISTS"


async def test_my_orders_require_user_header(
    client: AsyncClient, repo: FakeRepository, cache: InMemoryCache
) -> None:
    service = OrderService(repo, cache)
    app.dependency_overrides[get_order_service] = lambda: service
    repo.results["list_user_orders"] = order_page()

    missing = await client.get("/api/v1/orders/me")
    ok = await client.get("/api/v1/orders/me", headers={"X-User-ID": USER_ID})

    assert missing.status_code == 422
    assert ok.status_code == 200
    assert repo.calls == [("list_user_orders", (uuid.UUID(USER_ID), 1, 40))]


async def test_create_order_returns_id(
    client: AsyncClient, repo: FakeRepository, cache: InMemoryCache
) -> None:
    service = OrderService(repo, cache)
    app.dependency_overrides[get_order_service] = lambda: service
    repo.results["create_order"] = 7

    response = await client.post(
        "/api/v1/orders",
        headers={"X-User-ID": USER_ID},
        json={
            "fio": "Ivan Petrov",
            "tel": "+10000000000",
            "email": "ivan@example.com",
            "address": "1 Main St",
            "delivery": "courier",
            "payment_method": "card",
            "items": [{"item_id": str(uuid.uuid4()), "quantity": 2}],
        },
    )

    assert response.status_code == 201
    assert response.json() == {"id": 7}


async def test_admin_order_listing_rejects_unknown_status(
    client: AsyncClient, repo: FakeRepository
) -> None:
    service = OrderService(repo)
    app.dependency_overrides[get_order_service] = lambda: service

    response = await client.get("/api/v1/orders", params={"status": "shipped"})

    assert response.status_code == 400
    assert repo.calls == []


async def test_remove_favorite_returns_204(
    client: AsyncClient, repo: FakeRepository, cache: InMemoryCache
) -> None:
    service = FavoriteService(repo, cache)
    app.dependency_overrides[get_favorite_service] = lambda: service
    repo.results["remove_favorite"] = None

    response = await client.delete(
        f"/api/v1/favorites/{uuid.uuid4()}", headers={"X-User-ID": USER_ID}
    )

    assert response.status_code == 204


async def test_request_id_is_echoed_or_generated(client: AsyncClient) -> None:
    echoed = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    replaced = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id!"})

    assert echoed.headers["X-Request-ID"] == "abc-123"
    assert replaced.headers["X-Request-ID"] != "bad id!"
    assert len(replaced.headers["X-Request-ID"]) == 36
