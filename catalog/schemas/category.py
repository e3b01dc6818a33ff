"""Category API schemas."""

from pydantic import BaseModel, Field, model_validator

from catalog.application.dtos.category import CategoryData, FilterData
from catalog.domain.enums import FilterType


class FilterRequest(BaseModel):
    """A category filter: equality over values, or a numeric range."""

    name: str = Field(..., min_length=1, max_length=100)
    filter_type: FilterType = FilterType.EQUALITY
    values: list[str] = Field(default_factory=list)
    min_value: float | None = None
    max_value: float | None = None

    @model_validator(mode="after")
    def check_range(self) -> "FilterRequest":
        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise ValueError("min_value must not exceed max_value")
        return self


class CategoryWriteRequest(BaseModel):
    """Request body for creating or replacing a category. The slug is derived from title."""

    title: str = Field(..., min_length=1, max_length=255)
    product_quantity: int = Field(default=0, ge=0)
    src: str = Field(default="", max_length=500)
    alt: str = Field(default="", max_length=255)
    parent_slug: str | None = None
    filters: list[FilterRequest] = Field(default_factory=list)

    def to_data(self) -> CategoryData:
        return CategoryData(
            title=self.title.strip(),
            product_quantity=self.product_quantity,
            src=self.src,
            alt=self.alt,
            parent_slug=self.parent_slug,
            filters=[
                FilterData(
                    name=f.name,
                    filter_type=f.filter_type.value,
                    values=list(f.values),
                    min_value=f.min_value,
                    max_value=f.max_value,
                )
                for f in self.filters
            ],
        )
