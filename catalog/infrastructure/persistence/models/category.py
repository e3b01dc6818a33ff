"""Category ORM models. Categories are addressed by slug and own their filters."""

from sqlalchemy import Float, ForeignKey, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.domain.enums import FilterType
from catalog.infrastructure.persistence.database import Base
from catalog.infrastructure.persistence.models.mixins import IntPkMixin, TimestampMixin


class Category(TimestampMixin, Base):
    """Product category. Table: category. Unique title; optional parent category."""

    __tablename__ = "category"

    slug: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    product_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    src: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    alt: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    parent_slug: Mapped[str | None] = mapped_column(
        String(255), ForeignKey("category.slug", ondelete="SET NULL"), nullable=True
    )

    filters: Mapped[list["Filter"]] = relationship(
        back_populates="category",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Filter.id",
    )


class Filter(IntPkMixin, Base):
    """Filter offered on a category page (equality values or a numeric range)."""

    __tablename__ = "category_filter"

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    values: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    filter_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=FilterType.EQUALITY.value
    )
    min_value: Mapped[float | None] = mapped_column(Float, nullable=True)
    max_value: Mapped[float | None] = mapped_column(Float, nullable=True)
    category_slug: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("category.slug", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    category: Mapped[Category] = relationship(back_populates="filters")
