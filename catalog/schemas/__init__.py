"""Pydantic request/response schemas for the API."""

from catalog.schemas.category import CategoryWriteRequest, FilterRequest
from catalog.schemas.common import OrderCreatedResponse, SlugResponse
from catalog.schemas.health import HealthResponse
from catalog.schemas.item import ItemAttributeRequest, ItemWriteRequest
from catalog.schemas.order import OrderCreateRequest, OrderItemRequest, OrderUpdateRequest
from catalog.schemas.promotion import PromotionItemRequest, PromotionWriteRequest

__all__ = [
    "CategoryWriteRequest",
    "FilterRequest",
    "HealthResponse",
    "ItemAttributeRequest",
    "ItemWriteRequest",
    "OrderCreateRequest",
    "OrderCreatedResponse",
    "OrderItemRequest",
    "OrderUpdateRequest",
    "PromotionItemRequest",
    "PromotionWriteRequest",
    "SlugResponse",
]
