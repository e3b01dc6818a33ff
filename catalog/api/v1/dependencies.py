"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the shared cache handle and the
cached services. Repositories are built per request session; the cache and
the pattern invalidator are process-wide (app.state).
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.interfaces.services import ICacheService
from catalog.application.services import (
    CategoryService,
    FavoriteService,
    ItemService,
    OrderService,
    PatternInvalidator,
    PromotionService,
)
from catalog.core.config import get_settings
from catalog.domain.exceptions import ValidationException
from catalog.infrastructure.persistence.database import get_db
from catalog.infrastructure.persistence.repositories import (
    CategoryRepository,
    FavoriteRepository,
    ItemRepository,
    OrderRepository,
    PromotionRepository,
)


def get_cache(request: Request) -> ICacheService | None:
    """Process-wide cache handle set by the lifespan (None when Redis is disabled)."""
    return getattr(request.app.state, "cache", None)


def get_invalidator(
    request: Request,
    cache: Annotated[ICacheService | None, Depends(get_cache)],
) -> PatternInvalidator:
    """Process-wide invalidator; created on first use when the lifespan did not run."""
    invalidator = getattr(request.app.state, "invalidator", None)
    if invalidator is None:
        invalidator = PatternInvalidator(cache)
        request.app.state.invalidator = invalidator
    return invalidator


CacheDep = Annotated[ICacheService | None, Depends(get_cache)]
InvalidatorDep = Annotated[PatternInvalidator, Depends(get_invalidator)]
DbDep = Annotated[AsyncSession, Depends(get_db)]


def get_item_service(db: DbDep, cache: CacheDep, invalidator: InvalidatorDep) -> ItemService:
    return ItemService(
        ItemRepository(db), cache, invalidator, get_settings().cache_ttl_default
    )


def get_category_service(
    db: DbDep, cache: CacheDep, invalidator: InvalidatorDep
) -> CategoryService:
    return CategoryService(
        CategoryRepository(db), cache, invalidator, get_settings().cache_ttl_default
    )


def get_promotion_service(
    db: DbDep, cache: CacheDep, invalidator: InvalidatorDep
) -> PromotionService:
    return PromotionService(
        PromotionRepository(db), cache, invalidator, get_settings().cache_ttl_default
    )


def get_order_service(
    db: DbDep, cache: CacheDep, invalidator: InvalidatorDep
) -> OrderService:
    return OrderService(
        OrderRepository(db), cache, invalidator, get_settings().cache_ttl_default
    )


def get_favorite_service(
    db: DbDep, cache: CacheDep, invalidator: InvalidatorDep
) -> FavoriteService:
    return FavoriteService(
        FavoriteRepository(db), cache, invalidator, get_settings().cache_ttl_default
    )


@dataclass(frozen=True)
class PageParams:
    page: int
    size: int


def get_page_params(
    page: Annotated[int, Query(ge=1)] = 1,
    size: Annotated[int | None, Query(ge=1)] = None,
) -> PageParams:
    """page (1-based) and size (defaults to default_page_size, capped at max_page_size)."""
    settings = get_settings()
    if size is not None and size > settings.max_page_size:
        raise ValidationException(
            f"size must be at most {settings.max_page_size}", field="size"
        )
    return PageParams(page=page, size=size or settings.default_page_size)


def get_user_id(x_user_id: Annotated[UUID, Header()]) -> UUID:
    """Caller identity from the X-User-ID header (set by the gateway)."""
    return x_user_id


ItemServiceDep = Annotated[ItemService, Depends(get_item_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
PromotionServiceDep = Annotated[PromotionService, Depends(get_promotion_service)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
FavoriteServiceDep = Annotated[FavoriteService, Depends(get_favorite_service)]
PageDep = Annotated[PageParams, Depends(get_page_params)]
UserIdDep = Annotated[UUID, Depends(get_user_id)]
