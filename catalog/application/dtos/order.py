"""DTOs for orders (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from catalog.application.dtos.item import ItemSummary
from catalog.application.dtos.pagination import Paginated


@dataclass(frozen=True)
class OrderItemResult:
    id: int
    quantity: int
    item: ItemSummary


@dataclass(frozen=True)
class OrderResult:
    """Order read-model. total_amount is computed from item prices at write time."""

    id: int
    status: str
    total_amount: float
    fio: str
    tel: str
    email: str
    address: str
    delivery: str
    payment_method: str
    user_id: UUID
    items: list[OrderItemResult]
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class OrderPage(Paginated):
    data: list[OrderResult]


@dataclass(frozen=True)
class OrderItemData:
    item_id: UUID
    quantity: int


@dataclass(frozen=True)
class OrderData:
    """Payload for create_order / update_order.

    On update, an empty items list keeps the current lines and total, and
    status None keeps the current status.
    """

    fio: str
    tel: str
    email: str
    address: str
    delivery: str
    payment_method: str
    items: list[OrderItemData] = field(default_factory=list)
    status: str | None = None
