"""Item API schemas."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from catalog.application.dtos.item import AttributeData, ItemData


class ItemAttributeRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    value: str = Field(..., max_length=255)


class ItemWriteRequest(BaseModel):
    """Request body for creating or fully replacing an item."""

    title: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0)
    article: str = Field(default="", max_length=100)
    description: str = ""
    quantity_in_stock: int = Field(default=0, ge=0)
    in_stock: bool = True
    src: str = Field(default="", max_length=500)
    alt: str = Field(default="", max_length=255)
    parent_item_id: UUID | None = None
    category_slugs: list[str] = Field(default_factory=list)
    labels: list[str] = Field(default_factory=list, description="e.g. hit, rec")
    attributes: list[ItemAttributeRequest] = Field(default_factory=list)
    related_item_ids: list[UUID] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v

    @field_validator("labels")
    @classmethod
    def normalize_labels(cls, v: list[str]) -> list[str]:
        return [label.strip().lower() for label in v if label.strip()]

    def to_data(self) -> ItemData:
        return ItemData(
            title=self.title,
            price=self.price,
            article=self.article,
            description=self.description,
            quantity_in_stock=self.quantity_in_stock,
            in_stock=self.in_stock,
            src=self.src,
            alt=self.alt,
            parent_item_id=self.parent_item_id,
            category_slugs=list(self.category_slugs),
            labels=list(self.labels),
            attributes=[AttributeData(name=a.name, value=a.value) for a in self.attributes],
            related_item_ids=list(self.related_item_ids),
        )
