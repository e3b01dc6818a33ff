"""Item ORM models: items, their attributes, labels, categories and related products."""

import uuid

from sqlalchemy import (
    Boolean,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.infrastructure.persistence.database import Base
from catalog.infrastructure.persistence.models.category import Category
from catalog.infrastructure.persistence.models.mixins import (
    IntPkMixin,
    TimestampMixin,
    UuidPkMixin,
)


class Item(UuidPkMixin, TimestampMixin, Base):
    """Catalog item. Table: item. parent_item_id links a variant to its base item."""

    __tablename__ = "item"

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    article: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity_in_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    src: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    alt: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    parent_item_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("item.id", ondelete="SET NULL"), nullable=True, index=True
    )

    labels: Mapped[list["ItemLabel"]] = relationship(
        back_populates="item", cascade="all, delete-orphan", lazy="selectin"
    )
    attributes: Mapped[list["ItemAttribute"]] = relationship(
        back_populates="item",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ItemAttribute.id",
    )
    categories: Mapped[list[Category]] = relationship(
        secondary="item_category", lazy="selectin", order_by=Category.title
    )


class ItemAttribute(IntPkMixin, Base):
    """Name/value attribute of an item (matched by category filters)."""

    __tablename__ = "item_attribute"

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False)
    item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("item.id", ondelete="CASCADE"), nullable=False, index=True
    )

    item: Mapped[Item] = relationship(back_populates="attributes")


class ItemLabel(IntPkMixin, Base):
    """Free-form label on an item ('hit', 'rec', ...). Unique (item_id, label)."""

    __tablename__ = "item_label"

    label: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("item.id", ondelete="CASCADE"), nullable=False, index=True
    )

    item: Mapped[Item] = relationship(back_populates="labels")

    __table_args__ = (UniqueConstraint("item_id", "label", name="uq_item_label"),)


class ItemCategory(Base):
    """Association between items and categories."""

    __tablename__ = "item_category"

    item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("item.id", ondelete="CASCADE"), primary_key=True
    )
    category_slug: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("category.slug", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )


class RelatedProduct(IntPkMixin, Base):
    """Directed 'related product' link from item_id to related_item_id."""

    __tablename__ = "related_product"

    item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("item.id", ondelete="CASCADE"), nullable=False, index=True
    )
    related_item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("item.id", ondelete="CASCADE"), nullable=False
    )

    related_item: Mapped[Item] = relationship(
        foreign_keys=[related_item_id], lazy="selectin"
    )

    __table_args__ = (
        UniqueConstraint("item_id", "related_item_id", name="uq_related_product"),
    )
