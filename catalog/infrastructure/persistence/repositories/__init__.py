"""Repositories: one per entity family, returning application DTOs."""

from catalog.infrastructure.persistence.repositories.base import BaseRepository
from catalog.infrastructure.persistence.repositories.category_repo import (
    CategoryRepository,
)
from catalog.infrastructure.persistence.repositories.favorite_repo import (
    FavoriteRepository,
)
from catalog.infrastructure.persistence.repositories.item_repo import ItemRepository
from catalog.infrastructure.persistence.repositories.order_repo import OrderRepository
from catalog.infrastructure.persistence.repositories.promotion_repo import (
    PromotionRepository,
)

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "FavoriteRepository",
    "ItemRepository",
    "OrderRepository",
    "PromotionRepository",
]
