"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.

Implementations raise NotFoundError / AlreadyExistsError from
catalog.application.interfaces.errors; every other exception is treated
as an internal failure by the services. Write methods are durable when they
return (the implementation commits).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from catalog.application.dtos.category import (
        CategoryData,
        CategoryPage,
        CategoryResult,
        FilterPage,
        FilterResult,
    )
    from catalog.application.dtos.favorite import FavoriteResult
    from catalog.application.dtos.item import (
        ItemAttributePage,
        ItemData,
        ItemPage,
        ItemResult,
        RelatedProductResult,
    )
    from catalog.application.dtos.order import OrderData, OrderPage, OrderResult
    from catalog.application.dtos.promotion import (
        PromotionData,
        PromotionItemPage,
        PromotionPage,
        PromotionResult,
    )


# Item repository interface
class IItemRepository(Protocol):
    """Protocol for item repository (DIP)."""

    async def list_items(self, page: int, size: int) -> ItemPage:
        """Return items, newest first."""

    async def get_item(self, item_id: UUID) -> ItemResult:
        """Return item by id. Raises NotFoundError."""

    async def search_items(self, query: str, page: int, size: int) -> ItemPage:
        """Return items whose title contains every whitespace-separated term."""

    async def list_related_items(self, item_id: UUID) -> list[RelatedProductResult]:
        """Return related products of an item. Raises NotFoundError for unknown item."""

    async def list_items_by_label(self, label: str, page: int, size: int) -> ItemPage:
        """Return items carrying label."""

    async def list_category_items(
        self,
        slug: str,
        page: int,
        size: int,
        filters: Mapping[str, Any],
        sort: str,
    ) -> ItemPage:
        """Return items in category slug matching filters. Raises NotFoundError for unknown category."""

    async def search_item_attributes(
        self, query: str, page: int, size: int
    ) -> ItemAttributePage:
        """Return attributes whose name or value contains query."""

    async def create_item(self, data: ItemData) -> ItemResult:
        """Create item. Raises NotFoundError when a referenced category/item is missing."""

    async def update_item(self, item_id: UUID, data: ItemData) -> ItemResult:
        """Replace item fields. Raises NotFoundError."""

    async def delete_item(self, item_id: UUID) -> None:
        """Delete item. Raises NotFoundError."""


# Category repository interface
class ICategoryRepository(Protocol):
    """Protocol for category repository (DIP)."""

    async def list_categories(self, page: int, size: int) -> CategoryPage:
        """Return categories ordered by title."""

    async def get_category(self, slug: str) -> CategoryResult:
        """Return category by slug. Raises NotFoundError."""

    async def search_categories(self, query: str, page: int, size: int) -> CategoryPage:
        """Return categories whose title contains query."""

    async def list_category_filters(self, slug: str) -> list[FilterResult]:
        """Return filters of a category. Raises NotFoundError for unknown category."""

    async def search_category_filters(
        self, query: str, page: int, size: int
    ) -> FilterPage:
        """Return filters whose name contains query."""

    async def create_category(self, slug: str, data: CategoryData) -> str:
        """Create category under slug; return slug. Raises AlreadyExistsError."""

    async def update_category(self, slug: str, data: CategoryData) -> None:
        """Update category. Raises NotFoundError."""

    async def delete_category(self, slug: str) -> None:
        """Delete category. Raises NotFoundError."""


# Promotion repository interface
class IPromotionRepository(Protocol):
    """Protocol for promotion repository (DIP)."""

    async def list_promotions(self, page: int, size: int) -> PromotionPage:
        """Return promotions, newest first."""

    async def get_promotion(self, slug: str) -> PromotionResult:
        """Return promotion by slug. Raises NotFoundError."""

    async def search_promotions(self, query: str, page: int, size: int) -> PromotionPage:
        """Return promotions whose title contains query."""

    async def list_promotion_items(
        self, slug: str, page: int, size: int
    ) -> PromotionItemPage:
        """Return discounted items of a promotion. Raises NotFoundError for unknown promotion."""

    async def create_promotion(self, slug: str, data: PromotionData) -> str:
        """Create promotion under slug; return slug. Raises AlreadyExistsError."""

    async def update_promotion(self, slug: str, data: PromotionData) -> PromotionResult:
        """Update promotion and return it. Raises NotFoundError."""

    async def delete_promotion(self, slug: str) -> None:
        """Delete promotion. Raises NotFoundError."""


# Order repository interface
class IOrderRepository(Protocol):
    """Protocol for order repository (DIP)."""

    async def list_orders(
        self, page: int, size: int, filters: Mapping[str, Any], sort: str
    ) -> OrderPage:
        """Return all orders (admin view) matching filters."""

    async def list_user_orders(self, user_id: UUID, page: int, size: int) -> OrderPage:
        """Return orders placed by a user, newest first."""

    async def get_order(self, order_id: int) -> OrderResult:
        """Return order by id. Raises NotFoundError."""

    async def create_order(self, user_id: UUID, data: OrderData) -> int:
        """Create a pending order; return its id. Raises NotFoundError for unknown items."""

    async def update_order(self, order_id: int, data: OrderData) -> None:
        """Update order (recomputing total when items are given). Raises NotFoundError."""

    async def cancel_order(self, order_id: int) -> None:
        """Mark order cancelled. Raises NotFoundError."""


# Favorite repository interface
class IFavoriteRepository(Protocol):
    """Protocol for favorite repository (DIP)."""

    async def list_favorites(self, user_id: UUID) -> list[FavoriteResult]:
        """Return a user's favorites, newest first."""

    async def add_favorite(self, user_id: UUID, item_id: UUID) -> FavoriteResult:
        """Add item to favorites. Raises NotFoundError (item) or AlreadyExistsError (pair)."""

    async def remove_favorite(self, user_id: UUID, item_id: UUID) -> None:
        """Remove item from favorites. Raises NotFoundError when the pair is absent."""
