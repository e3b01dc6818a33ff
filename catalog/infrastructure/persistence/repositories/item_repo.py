"""Item repository. Returns application DTOs (ItemResult, ItemPage, ...)."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.dtos.item import (
    ItemAttributePage,
    ItemData,
    ItemPage,
    ItemResult,
    RelatedProductResult,
)
from catalog.application.interfaces.errors import NotFoundError
from catalog.infrastructure.persistence.models import (
    Category,
    Item,
    ItemAttribute,
    ItemCategory,
    ItemLabel,
    RelatedProduct,
)
from catalog.infrastructure.persistence.repositories._mappers import (
    attribute_result,
    item_result,
    related_result,
)
from catalog.infrastructure.persistence.repositories.base import BaseRepository

# Filter-map keys that bound the item price instead of an attribute.
MIN_PRICE_KEY = "min_price"
MAX_PRICE_KEY = "max_price"

_ITEM_SORTS: dict[str, ColumnElement[Any]] = {
    "price": Item.price.asc(),
    "-price": Item.price.desc(),
    "title": Item.title.asc(),
    "-title": Item.title.desc(),
    "name": Item.title.asc(),
    "-name": Item.title.desc(),
    "created_at": Item.created_at.asc(),
    "-created_at": Item.created_at.desc(),
}


def _item_order(sort: str) -> list[ColumnElement[Any]]:
    """ORDER BY for sort; unknown values fall back to newest first."""
    return [_ITEM_SORTS.get(sort, Item.created_at.desc()), Item.id.asc()]


def _attribute_exists(name: str, *conditions: ColumnElement[bool]) -> ColumnElement[bool]:
    return (
        select(ItemAttribute.id)
        .where(ItemAttribute.item_id == Item.id, ItemAttribute.name == name, *conditions)
        .exists()
    )


def _filter_conditions(filters: Mapping[str, Any]) -> list[ColumnElement[bool]]:
    """Translate a category filter map into WHERE conditions on Item.

    min_price/max_price bound Item.price; a {min,max} mapping bounds the
    attribute value (string comparison); a list restricts the attribute to
    the given values; any other value must equal the attribute value.
    """
    conditions: list[ColumnElement[bool]] = []
    for name, value in filters.items():
        if name == MIN_PRICE_KEY:
            conditions.append(Item.price >= float(value))
        elif name == MAX_PRICE_KEY:
            conditions.append(Item.price <= float(value))
        elif isinstance(value, Mapping):
            bounds: list[ColumnElement[bool]] = []
            if value.get("min") is not None:
                bounds.append(ItemAttribute.value >= str(value["min"]))
            if value.get("max") is not None:
                bounds.append(ItemAttribute.value <= str(value["max"]))
            conditions.append(_attribute_exists(name, *bounds))
        elif isinstance(value, (list, tuple)):
            conditions.append(
                _attribute_exists(name, ItemAttribute.value.in_([str(v) for v in value]))
            )
        else:
            conditions.append(_attribute_exists(name, ItemAttribute.value == str(value)))
    return conditions


def _unique(values: Iterable[Any]) -> list[Any]:
    return list(dict.fromkeys(values))


class ItemRepository(BaseRepository[Item]):
    """Items with their labels, attributes, categories and related products."""

    resource_type = "item"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Item)

    async def _page(self, stmt: Any, page: int, size: int) -> ItemPage:
        rows, meta = await self.paginate(stmt, page, size)
        return ItemPage(data=[item_result(i) for i in rows], **meta)

    async def list_items(self, page: int, size: int) -> ItemPage:
        return await self._page(select(Item).order_by(*_item_order("")), page, size)

    async def get_item(self, item_id: uuid.UUID) -> ItemResult:
        return item_result(await self.get_or_raise(item_id))

    async def search_items(self, query: str, page: int, size: int) -> ItemPage:
        stmt = select(Item).where(
            *(Item.title.ilike(f"%{term}%") for term in query.split())
        )
        return await self._page(stmt.order_by(*_item_order("")), page, size)

    async def list_related_items(self, item_id: uuid.UUID) -> list[RelatedProductResult]:
        if not await self.exists(Item, item_id):
            raise NotFoundError(resource_type="item", resource_id=item_id)
        result = await self.db.execute(
            select(RelatedProduct)
            .where(RelatedProduct.item_id == item_id)
            .order_by(RelatedProduct.id)
        )
        return [related_result(r) for r in result.scalars().all()]

    async def list_items_by_label(self, label: str, page: int, size: int) -> ItemPage:
        labelled = (
            select(ItemLabel.id)
            .where(ItemLabel.item_id == Item.id, ItemLabel.label == label)
            .exists()
        )
        stmt = select(Item).where(labelled).order_by(*_item_order(""))
        return await self._page(stmt, page, size)

    async def list_category_items(
        self,
        slug: str,
        page: int,
        size: int,
        filters: Mapping[str, Any],
        sort: str,
    ) -> ItemPage:
        if not await self.exists(Category, slug):
            raise NotFoundError(resource_type="category", resource_id=slug)
        in_category = (
            select(ItemCategory.item_id)
            .where(ItemCategory.item_id == Item.id, ItemCategory.category_slug == slug)
            .exists()
        )
        stmt = (
            select(Item)
            .where(in_category, *_filter_conditions(filters))
            .order_by(*_item_order(sort))
        )
        return await self._page(stmt, page, size)

    async def search_item_attributes(
        self, query: str, page: int, size: int
    ) -> ItemAttributePage:
        pattern = f"%{query}%"
        stmt = (
            select(ItemAttribute)
            .where(ItemAttribute.name.ilike(pattern) | ItemAttribute.value.ilike(pattern))
            .order_by(ItemAttribute.name, ItemAttribute.id)
        )
        rows, meta = await self.paginate(stmt, page, size)
        return ItemAttributePage(data=[attribute_result(a) for a in rows], **meta)

    async def _load_categories(self, slugs: list[str]) -> list[Category]:
        if not slugs:
            return []
        result = await self.db.execute(select(Category).where(Category.slug.in_(slugs)))
        found = {c.slug: c for c in result.scalars().all()}
        for slug in slugs:
            if slug not in found:
                raise NotFoundError(resource_type="category", resource_id=slug)
        return [found[s] for s in slugs]

    async def _check_items_exist(self, item_ids: Iterable[uuid.UUID]) -> None:
        for ref in item_ids:
            if not await self.exists(Item, ref):
                raise NotFoundError(resource_type="item", resource_id=ref)

    def _apply(self, item: Item, data: ItemData) -> None:
        item.title = data.title
        item.article = data.article
        item.description = data.description
        item.price = data.price
        item.quantity_in_stock = data.quantity_in_stock
        item.in_stock = data.in_stock
        item.src = data.src
        item.alt = data.alt
        item.parent_item_id = data.parent_item_id

    def _replace_children(
        self, item: Item, data: ItemData, categories: list[Category]
    ) -> None:
        item.categories = categories
        item.labels = [ItemLabel(label=label) for label in _unique(data.labels)]
        item.attributes = [
            ItemAttribute(name=a.name, value=a.value) for a in data.attributes
        ]
        for related_id in _unique(data.related_item_ids):
            self.db.add(RelatedProduct(item_id=item.id, related_item_id=related_id))

    async def create_item(self, data: ItemData) -> ItemResult:
        refs = list(data.related_item_ids)
        if data.parent_item_id is not None:
            refs.append(data.parent_item_id)
        await self._check_items_exist(_unique(refs))
        categories = await self._load_categories(_unique(data.category_slugs))
        item = Item(id=uuid.uuid4())
        self._apply(item, data)
        self.db.add(item)
        self._replace_children(item, data, categories)
        await self._commit(resource_id=data.title)
        return item_result(await self.get_or_raise(item.id, refresh=True))

    async def update_item(self, item_id: uuid.UUID, data: ItemData) -> ItemResult:
        item = await self.get_or_raise(item_id)
        refs = list(data.related_item_ids)
        if data.parent_item_id is not None:
            refs.append(data.parent_item_id)
        await self._check_items_exist(_unique(refs))
        categories = await self._load_categories(_unique(data.category_slugs))
        self._apply(item, data)
        # Drop old children first so re-added labels do not hit uq_item_label.
        item.labels.clear()
        item.attributes.clear()
        await self.db.execute(delete(RelatedProduct).where(RelatedProduct.item_id == item_id))
        await self.db.flush()
        self._replace_children(item, data, categories)
        await self._commit(resource_id=item_id)
        return item_result(await self.get_or_raise(item_id, refresh=True))

    async def delete_item(self, item_id: uuid.UUID) -> None:
        await self._delete_by_pk(item_id)
