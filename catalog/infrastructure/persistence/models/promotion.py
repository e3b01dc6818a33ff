"""Promotion ORM models: time-limited promotions and their discounted items."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.infrastructure.persistence.database import Base
from catalog.infrastructure.persistence.models.item import Item
from catalog.infrastructure.persistence.models.mixins import IntPkMixin, TimestampMixin


class Promotion(TimestampMixin, Base):
    """Promotion addressed by slug. Table: promotion."""

    __tablename__ = "promotion"

    slug: Mapped[str] = mapped_column(String(255), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    src: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    alt: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    lasts_to: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    items: Mapped[list["PromotionItem"]] = relationship(
        back_populates="promotion", cascade="all, delete-orphan", passive_deletes=True
    )


class PromotionItem(IntPkMixin, Base):
    """Item taking part in a promotion with a percentage discount."""

    __tablename__ = "promotion_item"

    discount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    promotion_slug: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("promotion.slug", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("item.id", ondelete="CASCADE"), nullable=False
    )

    promotion: Mapped[Promotion] = relationship(back_populates="items")
    item: Mapped[Item] = relationship(lazy="selectin")
