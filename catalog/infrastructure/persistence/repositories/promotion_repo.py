"""Promotion repository. Returns PromotionResult / PromotionItemPage DTOs."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.dtos.promotion import (
    PromotionData,
    PromotionItemPage,
    PromotionPage,
    PromotionResult,
)
from catalog.application.interfaces.errors import AlreadyExistsError, NotFoundError
from catalog.infrastructure.persistence.models import Item, Promotion, PromotionItem
from catalog.infrastructure.persistence.repositories._mappers import (
    promotion_item_result,
    promotion_result,
)
from catalog.infrastructure.persistence.repositories.base import BaseRepository


class PromotionRepository(BaseRepository[Promotion]):
    resource_type = "promotion"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Promotion)

    async def list_promotions(self, page: int, size: int) -> PromotionPage:
        stmt = select(Promotion).order_by(Promotion.created_at.desc(), Promotion.slug)
        rows, meta = await self.paginate(stmt, page, size)
        return PromotionPage(data=[promotion_result(p) for p in rows], **meta)

    async def get_promotion(self, slug: str) -> PromotionResult:
        return promotion_result(await self.get_or_raise(slug))

    async def search_promotions(self, query: str, page: int, size: int) -> PromotionPage:
        stmt = (
            select(Promotion)
            .where(Promotion.title.ilike(f"%{query}%"))
            .order_by(Promotion.created_at.desc(), Promotion.slug)
        )
        rows, meta = await self.paginate(stmt, page, size)
        return PromotionPage(data=[promotion_result(p) for p in rows], **meta)

    async def list_promotion_items(
        self, slug: str, page: int, size: int
    ) -> PromotionItemPage:
        if not await self.exists(Promotion, slug):
            raise NotFoundError(resource_type="promotion", resource_id=slug)
        stmt = (
            select(PromotionItem)
            .where(PromotionItem.promotion_slug == slug)
            .order_by(PromotionItem.id)
        )
        rows, meta = await self.paginate(stmt, page, size)
        return PromotionItemPage(data=[promotion_item_result(pi) for pi in rows], **meta)

    async def _promotion_items(self, data: PromotionData) -> list[PromotionItem]:
        items = []
        for entry in data.items:
            if not await self.exists(Item, entry.item_id):
                raise NotFoundError(resource_type="item", resource_id=entry.item_id)
            items.append(PromotionItem(item_id=entry.item_id, discount=entry.discount))
        return items

    async def create_promotion(self, slug: str, data: PromotionData) -> str:
        if await self.exists(Promotion, slug):
            raise AlreadyExistsError(resource_type="promotion", resource_id=slug)
        promotion = Promotion(
            slug=slug,
            title=data.title,
            description=data.description,
            src=data.src,
            alt=data.alt,
            lasts_to=data.lasts_to,
        )
        promotion.items = await self._promotion_items(data)
        self.db.add(promotion)
        await self._commit(resource_id=slug)
        return slug

    async def update_promotion(self, slug: str, data: PromotionData) -> PromotionResult:
        promotion = await self.get_or_raise(slug)
        items = await self._promotion_items(data)
        promotion.title = data.title
        promotion.description = data.description
        promotion.src = data.src
        promotion.alt = data.alt
        promotion.lasts_to = data.lasts_to
        existing = (
            await self.db.execute(
                select(PromotionItem).where(PromotionItem.promotion_slug == slug)
            )
        ).scalars().all()
        for row in existing:
            await self.db.delete(row)
        await self.db.flush()
        for row in items:
            row.promotion_slug = slug
            self.db.add(row)
        await self._commit(resource_id=slug)
        return promotion_result(await self.get_or_raise(slug, refresh=True))

    async def delete_promotion(self, slug: str) -> None:
        await self._delete_by_pk(slug)
