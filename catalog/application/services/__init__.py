"""Application services: cached catalog operations per entity family."""

from catalog.application.services.cached_service import CachedService
from catalog.application.services.category_service import CategoryService
from catalog.application.services.favorite_service import FavoriteService
from catalog.application.services.invalidation import PatternInvalidator
from catalog.application.services.item_service import ItemService
from catalog.application.services.order_service import OrderService
from catalog.application.services.promotion_service import PromotionService

__all__ = [
    "CachedService",
    "CategoryService",
    "FavoriteService",
    "ItemService",
    "OrderService",
    "PatternInvalidator",
    "PromotionService",
]
