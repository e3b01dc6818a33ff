"""Favorite service: one cached list per user, evicted by exact key on change."""

from __future__ import annotations

from uuid import UUID

from catalog.application.dtos.favorite import FavoriteResult
from catalog.application.interfaces.repositories import IFavoriteRepository
from catalog.application.interfaces.services import ICacheService
from catalog.application.services.cached_service import CachedService
from catalog.application.services.invalidation import PatternInvalidator
from catalog.core.constants import CACHE_TTL_DEFAULT
from catalog.infrastructure.cache import keys


class FavoriteService(CachedService):
    resource_type = "favorite"

    def __init__(
        self,
        favorite_repo: IFavoriteRepository,
        cache: ICacheService | None = None,
        invalidator: PatternInvalidator | None = None,
        cache_ttl: int = CACHE_TTL_DEFAULT,
    ) -> None:
        super().__init__(cache, invalidator, cache_ttl)
        self.favorite_repo = favorite_repo

    async def list_favorites(self, user_id: UUID) -> list[FavoriteResult]:
        key = self._key(keys.favorites_key, user_id)
        return await self._read_through(
            "list_favorites",
            key,
            list[FavoriteResult],
            lambda: self.favorite_repo.list_favorites(user_id),
            resource_id=user_id,
        )

    async def add_favorite(self, user_id: UUID, item_id: UUID) -> FavoriteResult:
        key = self._key(keys.favorites_key, user_id)
        return await self._write_through(
            "add_favorite",
            lambda: self.favorite_repo.add_favorite(user_id, item_id),
            resource_id=item_id,
            key=key,
        )

    async def remove_favorite(self, user_id: UUID, item_id: UUID) -> None:
        key = self._key(keys.favorites_key, user_id)
        await self._write_through(
            "remove_favorite",
            lambda: self.favorite_repo.remove_favorite(user_id, item_id),
            resource_id=item_id,
            key=key,
        )
