"""Persistence models: ORM entities and mixins."""

from catalog.infrastructure.persistence.models.category import Category, Filter
from catalog.infrastructure.persistence.models.favorite import Favorite
from catalog.infrastructure.persistence.models.item import (
    Item,
    ItemAttribute,
    ItemCategory,
    ItemLabel,
    RelatedProduct,
)
from catalog.infrastructure.persistence.models.mixins import (
    IntPkMixin,
    TimestampMixin,
    UuidPkMixin,
)
from catalog.infrastructure.persistence.models.order import Order, OrderItem
from catalog.infrastructure.persistence.models.promotion import Promotion, PromotionItem

__all__ = [
    "Category",
    "Favorite",
    "Filter",
    "IntPkMixin",
    "Item",
    "ItemAttribute",
    "ItemCategory",
    "ItemLabel",
    "Order",
    "OrderItem",
    "Promotion",
    "PromotionItem",
    "RelatedProduct",
    "TimestampMixin",
    "UuidPkMixin",
]
