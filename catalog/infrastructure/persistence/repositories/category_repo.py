"""Category repository. Categories are keyed by slug and own their filters."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.dtos.category import (
    CategoryData,
    CategoryPage,
    CategoryResult,
    FilterData,
    FilterPage,
    FilterResult,
)
from catalog.application.interfaces.errors import AlreadyExistsError, NotFoundError
from catalog.infrastructure.persistence.models import Category, Filter
from catalog.infrastructure.persistence.repositories._mappers import (
    category_result,
    filter_result,
)
from catalog.infrastructure.persistence.repositories.base import BaseRepository


def _to_filter(f: FilterData) -> Filter:
    return Filter(
        name=f.name,
        filter_type=f.filter_type,
        values=list(f.values),
        min_value=f.min_value,
        max_value=f.max_value,
    )


class CategoryRepository(BaseRepository[Category]):
    resource_type = "category"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Category)

    async def list_categories(self, page: int, size: int) -> CategoryPage:
        stmt = select(Category).order_by(Category.title)
        rows, meta = await self.paginate(stmt, page, size)
        return CategoryPage(data=[category_result(c) for c in rows], **meta)

    async def get_category(self, slug: str) -> CategoryResult:
        return category_result(await self.get_or_raise(slug))

    async def search_categories(self, query: str, page: int, size: int) -> CategoryPage:
        stmt = (
            select(Category)
            .where(Category.title.ilike(f"%{query}%"))
            .order_by(Category.title)
        )
        rows, meta = await self.paginate(stmt, page, size)
        return CategoryPage(data=[category_result(c) for c in rows], **meta)

    async def list_category_filters(self, slug: str) -> list[FilterResult]:
        category = await self.get_or_raise(slug)
        return [filter_result(f) for f in category.filters]

    async def search_category_filters(
        self, query: str, page: int, size: int
    ) -> FilterPage:
        stmt = (
            select(Filter)
            .where(Filter.name.ilike(f"%{query}%"))
            .order_by(Filter.name, Filter.id)
        )
        rows, meta = await self.paginate(stmt, page, size)
        return FilterPage(data=[filter_result(f) for f in rows], **meta)

    async def _check_parent(self, parent_slug: str | None) -> None:
        if parent_slug is not None and not await self.exists(Category, parent_slug):
            raise NotFoundError(resource_type="category", resource_id=parent_slug)

    async def create_category(self, slug: str, data: CategoryData) -> str:
        """Insert category (and its filters). Slug or title collisions raise AlreadyExistsError."""
        if await self.exists(Category, slug):
            raise AlreadyExistsError(resource_type="category", resource_id=slug)
        await self._check_parent(data.parent_slug)
        category = Category(
            slug=slug,
            title=data.title,
            product_quantity=data.product_quantity,
            src=data.src,
            alt=data.alt,
            parent_slug=data.parent_slug,
        )
        category.filters = [_to_filter(f) for f in data.filters]
        self.db.add(category)
        await self._commit(resource_id=slug)
        return slug

    async def update_category(self, slug: str, data: CategoryData) -> None:
        """Replace category fields and filters; the slug never changes."""
        category = await self.get_or_raise(slug)
        await self._check_parent(data.parent_slug)
        category.title = data.title
        category.product_quantity = data.product_quantity
        category.src = data.src
        category.alt = data.alt
        category.parent_slug = data.parent_slug
        category.filters = [_to_filter(f) for f in data.filters]
        await self._commit(resource_id=slug)

    async def delete_category(self, slug: str) -> None:
        await self._delete_by_pk(slug)
