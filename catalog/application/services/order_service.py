"""Order service: cached order reads, uncached admin listing, order writes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from catalog.application.dtos.order import OrderData, OrderPage, OrderResult
from catalog.application.interfaces.repositories import IOrderRepository
from catalog.application.interfaces.services import ICacheService
from catalog.application.services.cached_service import CachedService
from catalog.application.services.invalidation import PatternInvalidator
from catalog.core.constants import CACHE_TTL_DEFAULT, ORDERS_FAMILY_PATTERN
from catalog.infrastructure.cache import keys


class OrderService(CachedService):
    resource_type = "order"

    def __init__(
        self,
        order_repo: IOrderRepository,
        cache: ICacheService | None = None,
        invalidator: PatternInvalidator | None = None,
        cache_ttl: int = CACHE_TTL_DEFAULT,
    ) -> None:
        super().__init__(cache, invalidator, cache_ttl)
        self.order_repo = order_repo

    async def get_order(self, order_id: int) -> OrderResult:
        key = self._key(keys.order_key, order_id)
        return await self._read_through(
            "get_order",
            key,
            OrderResult,
            lambda: self.order_repo.get_order(order_id),
            resource_id=order_id,
        )

    async def list_user_orders(self, user_id: UUID, page: int, size: int) -> OrderPage:
        key = self._key(keys.user_orders_key, user_id, page, size)
        return await self._read_through(
            "list_user_orders",
            key,
            OrderPage,
            lambda: self.order_repo.list_user_orders(user_id, page, size),
            resource_id=user_id,
        )

    async def list_orders(
        self,
        page: int,
        size: int,
        filters: Mapping[str, Any] | None = None,
        sort: str = "",
    ) -> OrderPage:
        """Admin listing of all orders. Never cached."""
        return await self._call_repository(
            "list_orders",
            lambda: self.order_repo.list_orders(page, size, filters or {}, sort),
        )

    async def create_order(self, user_id: UUID, data: OrderData) -> int:
        """Place a pending order for user_id; returns the new order id."""
        return await self._write_through(
            "create_order",
            lambda: self.order_repo.create_order(user_id, data),
            resource_id=user_id,
            pattern=ORDERS_FAMILY_PATTERN,
        )

    async def update_order(self, order_id: int, data: OrderData) -> None:
        key = self._key(keys.order_key, order_id)
        await self._write_through(
            "update_order",
            lambda: self.order_repo.update_order(order_id, data),
            resource_id=order_id,
            key=key,
            pattern=ORDERS_FAMILY_PATTERN,
        )

    async def cancel_order(self, order_id: int) -> None:
        key = self._key(keys.order_key, order_id)
        await self._write_through(
            "cancel_order",
            lambda: self.order_repo.cancel_order(order_id),
            resource_id=order_id,
            key=key,
            pattern=ORDERS_FAMILY_PATTERN,
        )
