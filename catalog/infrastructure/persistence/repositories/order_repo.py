"""Order repository. Totals are computed from current item prices on write."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.dtos.order import (
    OrderData,
    OrderItemData,
    OrderPage,
    OrderResult,
)
from catalog.application.interfaces.errors import NotFoundError
from catalog.domain.enums import OrderStatus
from catalog.infrastructure.persistence.models import Item, Order, OrderItem
from catalog.infrastructure.persistence.repositories._mappers import order_result
from catalog.infrastructure.persistence.repositories.base import BaseRepository

_ORDER_SORTS: dict[str, ColumnElement[Any]] = {
    "created_at": Order.created_at.asc(),
    "-created_at": Order.created_at.desc(),
    "total_amount": Order.total_amount.asc(),
    "-total_amount": Order.total_amount.desc(),
    "status": Order.status.asc(),
    "-status": Order.status.desc(),
}


def _order_conditions(filters: Mapping[str, Any]) -> list[ColumnElement[bool]]:
    """Admin list filters: status (value or list) and user_id."""
    conditions: list[ColumnElement[bool]] = []
    status = filters.get("status")
    if isinstance(status, (list, tuple)):
        conditions.append(Order.status.in_([str(s) for s in status]))
    elif status is not None:
        conditions.append(Order.status == str(status))
    user_id = filters.get("user_id")
    if user_id is not None:
        conditions.append(Order.user_id == uuid.UUID(str(user_id)))
    return conditions


class OrderRepository(BaseRepository[Order]):
    resource_type = "order"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Order)

    async def list_orders(
        self, page: int, size: int, filters: Mapping[str, Any], sort: str
    ) -> OrderPage:
        stmt = (
            select(Order)
            .where(*_order_conditions(filters))
            .order_by(_ORDER_SORTS.get(sort, Order.created_at.desc()), Order.id.desc())
        )
        rows, meta = await self.paginate(stmt, page, size)
        return OrderPage(data=[order_result(o) for o in rows], **meta)

    async def list_user_orders(self, user_id: uuid.UUID, page: int, size: int) -> OrderPage:
        stmt = (
            select(Order)
            .where(Order.user_id == user_id)
            .order_by(Order.created_at.desc(), Order.id.desc())
        )
        rows, meta = await self.paginate(stmt, page, size)
        return OrderPage(data=[order_result(o) for o in rows], **meta)

    async def get_order(self, order_id: int) -> OrderResult:
        return order_result(await self.get_or_raise(order_id))

    async def _priced_lines(
        self, lines: list[OrderItemData]
    ) -> tuple[list[OrderItem], float]:
        """Build order lines and their total. Raises NotFoundError for an unknown item."""
        ids = list(dict.fromkeys(line.item_id for line in lines))
        prices: dict[uuid.UUID, float] = {}
        if ids:
            result = await self.db.execute(select(Item.id, Item.price).where(Item.id.in_(ids)))
            prices = {row.id: row.price for row in result}
        total = 0.0
        rows = []
        for line in lines:
            if line.item_id not in prices:
                raise NotFoundError(resource_type="item", resource_id=line.item_id)
            total += prices[line.item_id] * line.quantity
            rows.append(OrderItem(item_id=line.item_id, quantity=line.quantity))
        return rows, round(total, 2)

    async def create_order(self, user_id: uuid.UUID, data: OrderData) -> int:
        lines, total = await self._priced_lines(data.items)
        order = Order(
            user_id=user_id,
            status=data.status or OrderStatus.PENDING.value,
            total_amount=total,
            fio=data.fio,
            tel=data.tel,
            email=data.email,
            address=data.address,
            delivery=data.delivery,
            payment_method=data.payment_method,
        )
        order.items = lines
        self.db.add(order)
        await self.db.flush()
        order_id = order.id
        await self._commit(resource_id=order_id)
        return order_id

    async def update_order(self, order_id: int, data: OrderData) -> None:
        """Replace contact fields; status and lines only when given."""
        order = await self.get_or_raise(order_id)
        order.fio = data.fio
        order.tel = data.tel
        order.email = data.email
        order.address = data.address
        order.delivery = data.delivery
        order.payment_method = data.payment_method
        if data.status:
            order.status = data.status
        if data.items:
            lines, total = await self._priced_lines(data.items)
            order.items.clear()
            await self.db.flush()
            order.items = lines
            order.total_amount = total
        await self._commit(resource_id=order_id)

    async def cancel_order(self, order_id: int) -> None:
        order = await self.get_or_raise(order_id)
        order.status = OrderStatus.CANCELLED.value
        await self._commit(resource_id=order_id)
