"""Order API. Callers are identified by the X-User-ID header."""

from fastapi import APIRouter, Query, Response

from catalog.api.v1.dependencies import OrderServiceDep, PageDep, UserIdDep
from catalog.api.v1.filters import parse_order_filters
from catalog.application.dtos.order import OrderPage, OrderResult
from catalog.schemas.common import OrderCreatedResponse
from catalog.schemas.order import OrderCreateRequest, OrderUpdateRequest

router = APIRouter()


@router.get("", response_model=OrderPage)
async def list_orders(
    service: OrderServiceDep,
    paging: PageDep,
    status: str | None = Query(None, description="Comma-separated statuses"),
    user_id: str | None = Query(None),
    sort: str = Query("", max_length=50),
) -> OrderPage:
    """Admin listing of all orders (not cached)."""
    filters = parse_order_filters(status, user_id)
    return await service.list_orders(paging.page, paging.size, filters, sort)


@router.get("/me", response_model=OrderPage)
async def list_my_orders(
    service: OrderServiceDep, paging: PageDep, user_id: UserIdDep
) -> OrderPage:
    return await service.list_user_orders(user_id, paging.page, paging.size)


@router.get("/{order_id}", response_model=OrderResult)
async def get_order(order_id: int, service: OrderServiceDep) -> OrderResult:
    return await service.get_order(order_id)


@router.post("", response_model=OrderCreatedResponse, status_code=201)
async def create_order(
    body: OrderCreateRequest, service: OrderServiceDep, user_id: UserIdDep
) -> OrderCreatedResponse:
    """Place an order; the total is computed from current item prices."""
    order_id = await service.create_order(user_id, body.to_data())
    return OrderCreatedResponse(id=order_id)


@router.put("/{order_id}", status_code=204)
async def update_order(
    order_id: int, body: OrderUpdateRequest, service: OrderServiceDep
) -> Response:
    await service.update_order(order_id, body.to_data())
    return Response(status_code=204)


@router.post("/{order_id}/cancel", status_code=204)
async def cancel_order(order_id: int, service: OrderServiceDep) -> Response:
    await service.cancel_order(order_id)
    return Response(status_code=204)
