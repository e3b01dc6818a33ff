"""DTOs for items (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from catalog.application.dtos.pagination import Paginated


@dataclass(frozen=True)
class CategoryRef:
    """Category an item belongs to (slug + title only)."""

    slug: str
    title: str


@dataclass(frozen=True)
class ItemAttributeResult:
    """Name/value attribute attached to an item."""

    id: int
    name: str
    value: str
    item_id: UUID


@dataclass(frozen=True)
class ItemSummary:
    """Compact item view embedded in related products, promotions, orders and favorites."""

    id: UUID
    title: str
    price: float
    src: str
    alt: str
    in_stock: bool


@dataclass(frozen=True)
class ItemResult:
    """Item read-model (result of get_item, list_items, create_item, etc.)."""

    id: UUID
    title: str
    article: str
    description: str
    price: float
    quantity_in_stock: int
    in_stock: bool
    src: str
    alt: str
    parent_item_id: UUID | None
    labels: list[str]
    categories: list[CategoryRef]
    attributes: list[ItemAttributeResult]
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class RelatedProductResult:
    """Related-product row of an item."""

    id: int
    item_id: UUID
    related_item: ItemSummary


@dataclass(frozen=True)
class ItemPage(Paginated):
    data: list[ItemResult]


@dataclass(frozen=True)
class ItemAttributePage(Paginated):
    data: list[ItemAttributeResult]


@dataclass(frozen=True)
class AttributeData:
    name: str
    value: str


@dataclass(frozen=True)
class ItemData:
    """Payload for create_item / update_item (full replacement of mutable fields)."""

    title: str
    price: float
    article: str = ""
    description: str = ""
    quantity_in_stock: int = 0
    in_stock: bool = True
    src: str = ""
    alt: str = ""
    parent_item_id: UUID | None = None
    category_slugs: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    attributes: list[AttributeData] = field(default_factory=list)
    related_item_ids: list[UUID] = field(default_factory=list)
