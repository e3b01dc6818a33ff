"""Favorite ORM model. Unique (user_id, item_id)."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from catalog.infrastructure.persistence.database import Base
from catalog.infrastructure.persistence.models.item import Item
from catalog.infrastructure.persistence.models.mixins import IntPkMixin


class Favorite(IntPkMixin, Base):
    __tablename__ = "favorite"

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("item.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    item: Mapped[Item] = relationship(lazy="selectin")

    __table_args__ = (
        UniqueConstraint("user_id", "item_id", name="uq_favorite_user_item"),
    )
