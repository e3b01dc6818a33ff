"""Item service: cached item reads and item writes with family invalidation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from catalog.application.dtos.item import (
    ItemAttributePage,
    ItemData,
    ItemPage,
    ItemResult,
    RelatedProductResult,
)
from catalog.application.interfaces.repositories import IItemRepository
from catalog.application.interfaces.services import ICacheService
from catalog.application.services.cached_service import CachedService
from catalog.application.services.invalidation import PatternInvalidator
from catalog.core.constants import CACHE_TTL_DEFAULT, ITEMS_FAMILY_PATTERN
from catalog.domain.enums import ItemLabel
from catalog.infrastructure.cache import keys


class ItemService(CachedService):
    """Items, their related products, label lists and category listings.

    Every list/search view lives in the ``items-*`` family; any item write
    evicts that whole family in the background.
    """

    resource_type = "item"

    def __init__(
        self,
        item_repo: IItemRepository,
        cache: ICacheService | None = None,
        invalidator: PatternInvalidator | None = None,
        cache_ttl: int = CACHE_TTL_DEFAULT,
    ) -> None:
        super().__init__(cache, invalidator, cache_ttl)
        self.item_repo = item_repo

    async def get_item(self, item_id: UUID) -> ItemResult:
        """Return item by id. Raises ResourceNotFoundException."""
        key = self._key(keys.item_key, item_id)
        return await self._read_through(
            "get_item",
            key,
            ItemResult,
            lambda: self.item_repo.get_item(item_id),
            resource_id=item_id,
        )

    async def list_items(self, page: int, size: int) -> ItemPage:
        key = self._key(keys.items_list_key, page, size)
        return await self._read_through(
            "list_items", key, ItemPage, lambda: self.item_repo.list_items(page, size)
        )

    async def search_items(self, query: str, page: int, size: int) -> ItemPage:
        key = self._key(keys.items_search_key, query, page, size)
        return await self._read_through(
            "search_items",
            key,
            ItemPage,
            lambda: self.item_repo.search_items(query, page, size),
        )

    async def list_related_items(self, item_id: UUID) -> list[RelatedProductResult]:
        key = self._key(keys.items_related_key, item_id)
        return await self._read_through(
            "list_related_items",
            key,
            list[RelatedProductResult],
            lambda: self.item_repo.list_related_items(item_id),
            resource_id=item_id,
        )

    async def list_items_by_label(self, label: str, page: int, size: int) -> ItemPage:
        key = self._key(keys.items_label_key, label, page, size)
        return await self._read_through(
            "list_items_by_label",
            key,
            ItemPage,
            lambda: self.item_repo.list_items_by_label(label, page, size),
        )

    async def list_hit_items(self, page: int, size: int) -> ItemPage:
        """Best sellers: items labelled ``hit``."""
        key = self._key(keys.items_hit_key, page, size)
        return await self._read_through(
            "list_hit_items",
            key,
            ItemPage,
            lambda: self.item_repo.list_items_by_label(ItemLabel.HIT.value, page, size),
        )

    async def list_recommended_items(self, page: int, size: int) -> ItemPage:
        """Recommendations: items labelled ``rec``."""
        key = self._key(keys.items_rec_key, page, size)
        return await self._read_through(
            "list_recommended_items",
            key,
            ItemPage,
            lambda: self.item_repo.list_items_by_label(ItemLabel.REC.value, page, size),
        )

    async def list_category_items(
        self,
        slug: str,
        page: int,
        size: int,
        filters: Mapping[str, Any] | None = None,
        sort: str = "",
    ) -> ItemPage:
        """Return a category's items narrowed by a filter map and ordered by sort.

        Equal filter maps share one cache entry regardless of insertion order.
        """
        filters = filters or {}
        key = self._key(keys.items_category_key, slug, page, size, filters, sort)
        return await self._read_through(
            "list_category_items",
            key,
            ItemPage,
            lambda: self.item_repo.list_category_items(slug, page, size, filters, sort),
            resource_id=slug,
        )

    async def search_item_attributes(
        self, query: str, page: int, size: int
    ) -> ItemAttributePage:
        key = self._key(keys.items_attr_search_key, query, page, size)
        return await self._read_through(
            "search_item_attributes",
            key,
            ItemAttributePage,
            lambda: self.item_repo.search_item_attributes(query, page, size),
        )

    async def create_item(self, data: ItemData) -> ItemResult:
        """Create item; evicts the items family (no single key to evict)."""
        return await self._write_through(
            "create_item",
            lambda: self.item_repo.create_item(data),
            resource_id=data.title,
            pattern=ITEMS_FAMILY_PATTERN,
        )

    async def update_item(self, item_id: UUID, data: ItemData) -> ItemResult:
        key = self._key(keys.item_key, item_id)
        return await self._write_through(
            "update_item",
            lambda: self.item_repo.update_item(item_id, data),
            resource_id=item_id,
            key=key,
            pattern=ITEMS_FAMILY_PATTERN,
        )

    async def delete_item(self, item_id: UUID) -> None:
        key = self._key(keys.item_key, item_id)
        await self._write_through(
            "delete_item",
            lambda: self.item_repo.delete_item(item_id),
            resource_id=item_id,
            key=key,
            pattern=ITEMS_FAMILY_PATTERN,
        )
