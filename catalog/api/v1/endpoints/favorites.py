"""Favorites API: the calling user's favorite items (X-User-ID header)."""

from uuid import UUID

from fastapi import APIRouter, Response

from catalog.api.v1.dependencies import FavoriteServiceDep, UserIdDep
from catalog.application.dtos.favorite import FavoriteResult

router = APIRouter()


@router.get("", response_model=list[FavoriteResult])
async def list_favorites(
    service: FavoriteServiceDep, user_id: UserIdDep
) -> list[FavoriteResult]:
    return await service.list_favorites(user_id)


@router.post("/{item_id}", response_model=FavoriteResult, status_code=201)
async def add_favorite(
    item_id: UUID, service: FavoriteServiceDep, user_id: UserIdDep
) -> FavoriteResult:
    """Add an item to favorites. 404 for unknown item, 409 if already added."""
    return await service.add_favorite(user_id, item_id)


@router.delete("/{item_id}", status_code=204)
async def remove_favorite(
    item_id: UUID, service: FavoriteServiceDep, user_id: UserIdDep
) -> Response:
    await service.remove_favorite(user_id, item_id)
    return Response(status_code=204)
