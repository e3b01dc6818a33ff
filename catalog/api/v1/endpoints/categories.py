"""Category API: categories, their filters and their (filtered) item listings."""

from fastapi import APIRouter, Query, Request, Response

from catalog.api.v1.dependencies import CategoryServiceDep, ItemServiceDep, PageDep
from catalog.api.v1.filters import parse_item_filters
from catalog.application.dtos.category import (
    CategoryPage,
    CategoryResult,
    FilterPage,
    FilterResult,
)
from catalog.application.dtos.item import ItemPage
from catalog.schemas.category import CategoryWriteRequest
from catalog.schemas.common import SlugResponse

router = APIRouter()


@router.get("", response_model=CategoryPage)
async def list_categories(service: CategoryServiceDep, paging: PageDep) -> CategoryPage:
    return await service.list_categories(paging.page, paging.size)


@router.get("/search", response_model=CategoryPage)
async def search_categories(
    service: CategoryServiceDep, paging: PageDep, q: str = Query("", max_length=200)
) -> CategoryPage:
    return await service.search_categories(q, paging.page, paging.size)


@router.get("/filters/search", response_model=FilterPage)
async def search_category_filters(
    service: CategoryServiceDep, paging: PageDep, q: str = Query("", max_length=200)
) -> FilterPage:
    return await service.search_category_filters(q, paging.page, paging.size)


@router.get("/{slug}", response_model=CategoryResult)
async def get_category(slug: str, service: CategoryServiceDep) -> CategoryResult:
    return await service.get_category(slug)


@router.get("/{slug}/filters", response_model=list[FilterResult])
async def list_category_filters(
    slug: str, service: CategoryServiceDep
) -> list[FilterResult]:
    return await service.list_category_filters(slug)


@router.get("/{slug}/items", response_model=ItemPage)
async def list_category_items(
    slug: str,
    request: Request,
    service: ItemServiceDep,
    paging: PageDep,
    sort: str = Query("", max_length=50, description="price, -price, title, -title, ..."),
) -> ItemPage:
    """List a category's items.

    Filters come from the query string: filter[<name>]=a,b,
    filter[<name>][min]=.., filter[<name>][max]=.., min_price, max_price.
    """
    filters = parse_item_filters(request.query_params.multi_items())
    return await service.list_category_items(slug, paging.page, paging.size, filters, sort)


@router.post("", response_model=SlugResponse, status_code=201)
async def create_category(
    body: CategoryWriteRequest, service: CategoryServiceDep
) -> SlugResponse:
    """Create a category; the slug is derived from the title and returned."""
    slug = await service.create_category(body.to_data())
    return SlugResponse(slug=slug)


@router.put("/{slug}", status_code=204)
async def update_category(
    slug: str, body: CategoryWriteRequest, service: CategoryServiceDep
) -> Response:
    await service.update_category(slug, body.to_data())
    return Response(status_code=204)


@router.delete("/{slug}", status_code=204)
async def delete_category(slug: str, service: CategoryServiceDep) -> Response:
    await service.delete_category(slug)
    return Response(status_code=204)
