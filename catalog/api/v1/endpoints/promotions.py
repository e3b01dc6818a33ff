"""Promotion API: thin routes delegating to PromotionService."""

from fastapi import APIRouter, Query, Response

from catalog.api.v1.dependencies import PageDep, PromotionServiceDep
from catalog.application.dtos.promotion import (
    PromotionItemPage,
    PromotionPage,
    PromotionResult,
)
from catalog.schemas.common import SlugResponse
from catalog.schemas.promotion import PromotionWriteRequest

router = APIRouter()


@router.get("", response_model=PromotionPage)
async def list_promotions(service: PromotionServiceDep, paging: PageDep) -> PromotionPage:
    return await service.list_promotions(paging.page, paging.size)


@router.get("/search", response_model=PromotionPage)
async def search_promotions(
    service: PromotionServiceDep, paging: PageDep, q: str = Query("", max_length=200)
) -> PromotionPage:
    return await service.search_promotions(q, paging.page, paging.size)


@router.get("/{slug}", response_model=PromotionResult)
async def get_promotion(slug: str, service: PromotionServiceDep) -> PromotionResult:
    return await service.get_promotion(slug)


@router.get("/{slug}/items", response_model=PromotionItemPage)
async def list_promotion_items(
    slug: str, service: PromotionServiceDep, paging: PageDep
) -> PromotionItemPage:
    """Discounted items of a promotion."""
    return await service.list_promotion_items(slug, paging.page, paging.size)


@router.post("", response_model=SlugResponse, status_code=201)
async def create_promotion(
    body: PromotionWriteRequest, service: PromotionServiceDep
) -> SlugResponse:
    slug = await service.create_promotion(body.to_data())
    return SlugResponse(slug=slug)


@router.put("/{slug}", response_model=PromotionResult)
async def update_promotion(
    slug: str, body: PromotionWriteRequest, service: PromotionServiceDep
) -> PromotionResult:
    return await service.update_promotion(slug, body.to_data())


@router.delete("/{slug}", status_code=204)
async def delete_promotion(slug: str, service: PromotionServiceDep) -> Response:
    await service.delete_promotion(slug)
    return Response(status_code=204)
