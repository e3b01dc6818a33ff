"""DTOs for categories and their filters (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from catalog.application.dtos.pagination import Paginated


@dataclass(frozen=True)
class FilterResult:
    """Category filter read-model. Range filters carry min/max, equality filters carry values."""

    id: int
    name: str
    values: list[str]
    filter_type: str
    min_value: float | None
    max_value: float | None
    category_slug: str


@dataclass(frozen=True)
class CategoryResult:
    """Category read-model (result of get_category, list_categories, etc.)."""

    slug: str
    title: str
    product_quantity: int
    src: str
    alt: str
    parent_slug: str | None
    filters: list[FilterResult]
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class CategoryPage(Paginated):
    data: list[CategoryResult]


@dataclass(frozen=True)
class FilterPage(Paginated):
    data: list[FilterResult]


@dataclass(frozen=True)
class FilterData:
    name: str
    filter_type: str
    values: list[str] = field(default_factory=list)
    min_value: float | None = None
    max_value: float | None = None


@dataclass(frozen=True)
class CategoryData:
    """Payload for create_category / update_category."""

    title: str
    product_quantity: int = 0
    src: str = ""
    alt: str = ""
    parent_slug: str | None = None
    filters: list[FilterData] = field(default_factory=list)
