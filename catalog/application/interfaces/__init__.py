"""Ports (Protocols) implemented by infrastructure: repositories and cache."""

from catalog.application.interfaces.errors import (
    AlreadyExistsError,
    NotFoundError,
    RepositoryError,
)
from catalog.application.interfaces.repositories import (
    ICategoryRepository,
    IFavoriteRepository,
    IItemRepository,
    IOrderRepository,
    IPromotionRepository,
)
from catalog.application.interfaces.services import ICacheService, IValueCodec

__all__ = [
    "AlreadyExistsError",
    "ICacheService",
    "ICategoryRepository",
    "IFavoriteRepository",
    "IItemRepository",
    "IOrderRepository",
    "IPromotionRepository",
    "IValueCodec",
    "NotFoundError",
    "RepositoryError",
]
