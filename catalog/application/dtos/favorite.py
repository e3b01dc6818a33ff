"""DTOs for favorites (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from catalog.application.dtos.item import ItemSummary


@dataclass(frozen=True)
class FavoriteResult:
    """Favorite read-model: one (user, item) pair."""

    id: int
    user_id: UUID
    item_id: UUID
    item: ItemSummary | None
    created_at: datetime | None = None
