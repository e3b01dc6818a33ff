"""Item API: thin routes delegating to ItemService (read-through cached)."""

from uuid import UUID

from fastapi import APIRouter, Query, Response

from catalog.api.v1.dependencies import ItemServiceDep, PageDep
from catalog.application.dtos.item import (
    ItemAttributePage,
    ItemPage,
    ItemResult,
    RelatedProductResult,
)
from catalog.schemas.item import ItemWriteRequest

router = APIRouter()


@router.get("", response_model=ItemPage)
async def list_items(service: ItemServiceDep, paging: PageDep) -> ItemPage:
    """List items, newest first."""
    return await service.list_items(paging.page, paging.size)


@router.get("/search", response_model=ItemPage)
async def search_items(
    service: ItemServiceDep, paging: PageDep, q: str = Query("", max_length=200)
) -> ItemPage:
    """Search items by title (every term must match)."""
    return await service.search_items(q, paging.page, paging.size)


@router.get("/hits", response_model=ItemPage)
async def list_hit_items(service: ItemServiceDep, paging: PageDep) -> ItemPage:
    return await service.list_hit_items(paging.page, paging.size)


@router.get("/recommended", response_model=ItemPage)
async def list_recommended_items(service: ItemServiceDep, paging: PageDep) -> ItemPage:
    return await service.list_recommended_items(paging.page, paging.size)


@router.get("/labels/{label}", response_model=ItemPage)
async def list_items_by_label(
    label: str, service: ItemServiceDep, paging: PageDep
) -> ItemPage:
    return await service.list_items_by_label(label, paging.page, paging.size)


@router.get("/attributes/search", response_model=ItemAttributePage)
async def search_item_attributes(
    service: ItemServiceDep, paging: PageDep, q: str = Query("", max_length=200)
) -> ItemAttributePage:
    """Search item attributes by name or value."""
    return await service.search_item_attributes(q, paging.page, paging.size)


@router.get("/{item_id}", response_model=ItemResult)
async def get_item(item_id: UUID, service: ItemServiceDep) -> ItemResult:
    return await service.get_item(item_id)


@router.get("/{item_id}/related", response_model=list[RelatedProductResult])
async def list_related_items(
    item_id: UUID, service: ItemServiceDep
) -> list[RelatedProductResult]:
    return await service.list_related_items(item_id)


@router.post("", response_model=ItemResult, status_code=201)
async def create_item(body: ItemWriteRequest, service: ItemServiceDep) -> ItemResult:
    """Create an item. Unknown category slugs or referenced items give 404."""
    return await service.create_item(body.to_data())


@router.put("/{item_id}", response_model=ItemResult)
async def update_item(
    item_id: UUID, body: ItemWriteRequest, service: ItemServiceDep
) -> ItemResult:
    """Replace an item's fields, labels, attributes, categories and related items."""
    return await service.update_item(item_id, body.to_data())


@router.delete("/{item_id}", status_code=204)
async def delete_item(item_id: UUID, service: ItemServiceDep) -> Response:
    await service.delete_item(item_id)
    return Response(status_code=204)
