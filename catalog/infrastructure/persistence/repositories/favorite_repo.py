"""Favorite repository: per-user favorite items. Unique (user_id, item_id)."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.dtos.favorite import FavoriteResult
from catalog.application.interfaces.errors import AlreadyExistsError, NotFoundError
from catalog.infrastructure.persistence.models import Favorite, Item
from catalog.infrastructure.persistence.repositories._mappers import favorite_result
from catalog.infrastructure.persistence.repositories.base import BaseRepository


class FavoriteRepository(BaseRepository[Favorite]):
    resource_type = "favorite"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Favorite)

    async def _find(self, user_id: uuid.UUID, item_id: uuid.UUID) -> Favorite | None:
        result = await self.db.execute(
            select(Favorite).where(Favorite.user_id == user_id, Favorite.item_id == item_id)
        )
        return result.scalar_one_or_none()

    async def list_favorites(self, user_id: uuid.UUID) -> list[FavoriteResult]:
        result = await self.db.execute(
            select(Favorite)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
        )
        return [favorite_result(f) for f in result.scalars().all()]

    async def add_favorite(self, user_id: uuid.UUID, item_id: uuid.UUID) -> FavoriteResult:
        if not await self.exists(Item, item_id):
            raise NotFoundError(resource_type="item", resource_id=item_id)
        favorite = Favorite(user_id=user_id, item_id=item_id)
        try:
            self.db.add(favorite)
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            raise AlreadyExistsError(
                resource_type="favorite", resource_id=f"{user_id}:{item_id}"
            ) from e
        favorite_id = favorite.id
        await self._commit(resource_id=item_id)
        return favorite_result(await self.get_or_raise(favorite_id, refresh=True))

    async def remove_favorite(self, user_id: uuid.UUID, item_id: uuid.UUID) -> None:
        favorite = await self._find(user_id, item_id)
        if favorite is None:
            raise NotFoundError(resource_type="favorite", resource_id=f"{user_id}:{item_id}")
        await self.db.delete(favorite)
        await self.db.commit()
