"""Promotion API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from catalog.application.dtos.promotion import PromotionData, PromotionItemData


class PromotionItemRequest(BaseModel):
    item_id: UUID
    discount: int = Field(..., ge=0, le=100, description="Discount in percent")


class PromotionWriteRequest(BaseModel):
    """Request body for creating or replacing a promotion."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    src: str = Field(default="", max_length=500)
    alt: str = Field(default="", max_length=255)
    lasts_to: datetime
    items: list[PromotionItemRequest] = Field(default_factory=list)

    def to_data(self) -> PromotionData:
        return PromotionData(
            title=self.title.strip(),
            description=self.description,
            src=self.src,
            alt=self.alt,
            lasts_to=self.lasts_to,
            items=[
                PromotionItemData(item_id=i.item_id, discount=i.discount)
                for i in self.items
            ],
        )
