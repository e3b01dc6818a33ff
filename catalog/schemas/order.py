"""Order API schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from catalog.application.dtos.order import OrderData, OrderItemData
from catalog.domain.enums import OrderStatus


class OrderItemRequest(BaseModel):
    item_id: UUID
    quantity: int = Field(..., ge=1)


class OrderContactFields(BaseModel):
    fio: str = Field(..., min_length=1, max_length=255, description="Customer full name")
    tel: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=3, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    delivery: str = Field(..., min_length=1, max_length=100)
    payment_method: str = Field(..., min_length=1, max_length=100)


class OrderCreateRequest(OrderContactFields):
    """Request body for placing an order (status starts as pending)."""

    items: list[OrderItemRequest] = Field(..., min_length=1)

    def to_data(self) -> OrderData:
        return OrderData(
            fio=self.fio,
            tel=self.tel,
            email=self.email,
            address=self.address,
            delivery=self.delivery,
            payment_method=self.payment_method,
            items=[OrderItemData(item_id=i.item_id, quantity=i.quantity) for i in self.items],
        )


class OrderUpdateRequest(OrderContactFields):
    """Request body for updating an order. Empty items keeps the current lines."""

    items: list[OrderItemRequest] = Field(default_factory=list)
    status: OrderStatus | None = None

    def to_data(self) -> OrderData:
        return OrderData(
            fio=self.fio,
            tel=self.tel,
            email=self.email,
            address=self.address,
            delivery=self.delivery,
            payment_method=self.payment_method,
            items=[OrderItemData(item_id=i.item_id, quantity=i.quantity) for i in self.items],
            status=self.status.value if self.status else None,
        )
