"""Category service: cached category/filter reads and category writes."""

from __future__ import annotations

from catalog.application.dtos.category import (
    CategoryData,
    CategoryPage,
    CategoryResult,
    FilterPage,
    FilterResult,
)
from catalog.application.interfaces.repositories import ICategoryRepository
from catalog.application.interfaces.services import ICacheService
from catalog.application.services.cached_service import CachedService
from catalog.application.services.invalidation import PatternInvalidator
from catalog.core.constants import CACHE_TTL_DEFAULT, CATEGORIES_FAMILY_PATTERN
from catalog.domain.exceptions import ValidationException
from catalog.infrastructure.cache import keys
from catalog.shared.utils import slugify


class CategoryService(CachedService):
    """Categories are addressed by slug; the slug is derived from the title on create."""

    resource_type = "category"

    def __init__(
        self,
        category_repo: ICategoryRepository,
        cache: ICacheService | None = None,
        invalidator: PatternInvalidator | None = None,
        cache_ttl: int = CACHE_TTL_DEFAULT,
    ) -> None:
        super().__init__(cache, invalidator, cache_ttl)
        self.category_repo = category_repo

    async def get_category(self, slug: str) -> CategoryResult:
        key = self._key(keys.category_key, slug)
        return await self._read_through(
            "get_category",
            key,
            CategoryResult,
            lambda: self.category_repo.get_category(slug),
            resource_id=slug,
        )

    async def list_categories(self, page: int, size: int) -> CategoryPage:
        key = self._key(keys.categories_list_key, page, size)
        return await self._read_through(
            "list_categories",
            key,
            CategoryPage,
            lambda: self.category_repo.list_categories(page, size),
        )

    async def search_categories(self, query: str, page: int, size: int) -> CategoryPage:
        key = self._key(keys.categories_search_key, query, page, size)
        return await self._read_through(
            "search_categories",
            key,
            CategoryPage,
            lambda: self.category_repo.search_categories(query, page, size),
        )

    async def list_category_filters(self, slug: str) -> list[FilterResult]:
        key = self._key(keys.category_filters_key, slug)
        return await self._read_through(
            "list_category_filters",
            key,
            list[FilterResult],
            lambda: self.category_repo.list_category_filters(slug),
            resource_id=slug,
        )

    async def search_category_filters(
        self, query: str, page: int, size: int
    ) -> FilterPage:
        key = self._key(keys.category_filters_search_key, query, page, size)
        return await self._read_through(
            "search_category_filters",
            key,
            FilterPage,
            lambda: self.category_repo.search_category_filters(query, page, size),
        )

    async def create_category(self, data: CategoryData) -> str:
        """Create category and return its slug.

        Raises:
            ValidationException: If the title yields an empty slug.
            ResourceAlreadyExistsException: If the slug or title is taken.
        """
        slug = slugify(data.title)
        if not slug:
            raise ValidationException(
                "Category title must contain at least one letter or digit", field="title"
            )
        return await self._write_through(
            "create_category",
            lambda: self.category_repo.create_category(slug, data),
            resource_id=slug,
            pattern=CATEGORIES_FAMILY_PATTERN,
        )

    async def update_category(self, slug: str, data: CategoryData) -> None:
        key = self._key(keys.category_key, slug)
        await self._write_through(
            "update_category",
            lambda: self.category_repo.update_category(slug, data),
            resource_id=slug,
            key=key,
            pattern=CATEGORIES_FAMILY_PATTERN,
        )

    async def delete_category(self, slug: str) -> None:
        key = self._key(keys.category_key, slug)
        await self._write_through(
            "delete_category",
            lambda: self.category_repo.delete_category(slug),
            resource_id=slug,
            key=key,
            pattern=CATEGORIES_FAMILY_PATTERN,
        )
