"""DTOs for promotions (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from catalog.application.dtos.item import ItemSummary
from catalog.application.dtos.pagination import Paginated


@dataclass(frozen=True)
class PromotionResult:
    """Promotion read-model."""

    slug: str
    title: str
    description: str
    src: str
    alt: str
    lasts_to: datetime
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PromotionItemResult:
    """Discounted item inside a promotion."""

    id: int
    discount: int
    promotion_slug: str
    item: ItemSummary


@dataclass(frozen=True)
class PromotionPage(Paginated):
    data: list[PromotionResult]


@dataclass(frozen=True)
class PromotionItemPage(Paginated):
    data: list[PromotionItemResult]


@dataclass(frozen=True)
class PromotionItemData:
    item_id: UUID
    discount: int


@dataclass(frozen=True)
class PromotionData:
    """Payload for create_promotion / update_promotion."""

    title: str
    description: str
    src: str
    lasts_to: datetime
    alt: str = ""
    items: list[PromotionItemData] = field(default_factory=list)
