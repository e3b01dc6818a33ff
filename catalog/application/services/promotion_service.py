"""Promotion service: cached promotion reads and promotion writes."""

from __future__ import annotations

from catalog.application.dtos.promotion import (
    PromotionData,
    PromotionItemPage,
    PromotionPage,
    PromotionResult,
)
from catalog.application.interfaces.repositories import IPromotionRepository
from catalog.application.interfaces.services import ICacheService
from catalog.application.services.cached_service import CachedService
from catalog.application.services.invalidation import PatternInvalidator
from catalog.core.constants import CACHE_TTL_DEFAULT, PROMOS_FAMILY_PATTERN
from catalog.domain.exceptions import ValidationException
from catalog.infrastructure.cache import keys
from catalog.shared.utils import slugify


class PromotionService(CachedService):
    """Promotions by slug, plus the discounted items of each promotion.

    Promotion items are cached under ``items-promos:...``, which belongs to
    the item family: item writes evict them, promotion writes do not.
    """

    resource_type = "promotion"

    def __init__(
        self,
        promotion_repo: IPromotionRepository,
        cache: ICacheService | None = None,
        invalidator: PatternInvalidator | None = None,
        cache_ttl: int = CACHE_TTL_DEFAULT,
    ) -> None:
        super().__init__(cache, invalidator, cache_ttl)
        self.promotion_repo = promotion_repo

    async def get_promotion(self, slug: str) -> PromotionResult:
        key = self._key(keys.promotion_key, slug)
        return await self._read_through(
            "get_promotion",
            key,
            PromotionResult,
            lambda: self.promotion_repo.get_promotion(slug),
            resource_id=slug,
        )

    async def list_promotions(self, page: int, size: int) -> PromotionPage:
        key = self._key(keys.promotions_list_key, page, size)
        return await self._read_through(
            "list_promotions",
            key,
            PromotionPage,
            lambda: self.promotion_repo.list_promotions(page, size),
        )

    async def search_promotions(self, query: str, page: int, size: int) -> PromotionPage:
        key = self._key(keys.promotions_search_key, query, page, size)
        return await self._read_through(
            "search_promotions",
            key,
            PromotionPage,
            lambda: self.promotion_repo.search_promotions(query, page, size),
        )

    async def list_promotion_items(
        self, slug: str, page: int, size: int
    ) -> PromotionItemPage:
        key = self._key(keys.items_promos_key, slug, page, size)
        return await self._read_through(
            "list_promotion_items",
            key,
            PromotionItemPage,
            lambda: self.promotion_repo.list_promotion_items(slug, page, size),
            resource_id=slug,
        )

    async def create_promotion(self, data: PromotionData) -> str:
        """Create promotion and return its slug (derived from the title)."""
        slug = slugify(data.title)
        if not slug:
            raise ValidationException(
                "Promotion title must contain at least one letter or digit", field="title"
            )
        return await self._write_through(
            "create_promotion",
            lambda: self.promotion_repo.create_promotion(slug, data),
            resource_id=slug,
            pattern=PROMOS_FAMILY_PATTERN,
        )

    async def update_promotion(self, slug: str, data: PromotionData) -> PromotionResult:
        key = self._key(keys.promotion_key, slug)
        return await self._write_through(
            "update_promotion",
            lambda: self.promotion_repo.update_promotion(slug, data),
            resource_id=slug,
            key=key,
            pattern=PROMOS_FAMILY_PATTERN,
        )

    async def delete_promotion(self, slug: str) -> None:
        key = self._key(keys.promotion_key, slug)
        await self._write_through(
            "delete_promotion",
            lambda: self.promotion_repo.delete_promotion(slug),
            resource_id=slug,
            key=key,
            pattern=PROMOS_FAMILY_PATTERN,
        )
