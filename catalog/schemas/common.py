"""Small response bodies shared by write endpoints."""

from pydantic import BaseModel


class SlugResponse(BaseModel):
    """Response for creates that return the new slug (categories, promotions)."""

    slug: str


class OrderCreatedResponse(BaseModel):
    id: int
