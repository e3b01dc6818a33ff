"""Application DTOs: read-models and write payloads passed between layers."""

from catalog.application.dtos.category import (
    CategoryData,
    CategoryPage,
    CategoryResult,
    FilterData,
    FilterPage,
    FilterResult,
)
from catalog.application.dtos.favorite import FavoriteResult
from catalog.application.dtos.item import (
    AttributeData,
    CategoryRef,
    ItemAttributePage,
    ItemAttributeResult,
    ItemData,
    ItemPage,
    ItemResult,
    ItemSummary,
    RelatedProductResult,
)
from catalog.application.dtos.order import (
    OrderData,
    OrderItemData,
    OrderItemResult,
    OrderPage,
    OrderResult,
)
from catalog.application.dtos.pagination import Paginated, page_meta
from catalog.application.dtos.promotion import (
    PromotionData,
    PromotionItemData,
    PromotionItemPage,
    PromotionItemResult,
    PromotionPage,
    PromotionResult,
)

__all__ = [
    "AttributeData",
    "CategoryData",
    "CategoryPage",
    "CategoryRef",
    "CategoryResult",
    "FavoriteResult",
    "FilterData",
    "FilterPage",
    "FilterResult",
    "ItemAttributePage",
    "ItemAttributeResult",
    "ItemData",
    "ItemPage",
    "ItemResult",
    "ItemSummary",
    "OrderData",
    "OrderItemData",
    "OrderItemResult",
    "OrderPage",
    "OrderResult",
    "Paginated",
    "PromotionData",
    "PromotionItemData",
    "PromotionItemPage",
    "PromotionItemResult",
    "PromotionPage",
    "PromotionResult",
    "RelatedProductResult",
    "page_meta",
]
