"""Order ORM models: customer orders and their line items."""

import uuid

from sqlalchemy import Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.domain.enums import OrderStatus
from catalog.infrastructure.persistence.database import Base
from catalog.infrastructure.persistence.models.item import Item
from catalog.infrastructure.persistence.models.mixins import IntPkMixin, TimestampMixin


class Order(IntPkMixin, TimestampMixin, Base):
    """Order placed by a user. total_amount is computed from item prices at write time."""

    __tablename__ = "orders"

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=OrderStatus.PENDING.value, index=True
    )
    total_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    fio: Mapped[str] = mapped_column(String(255), nullable=False)
    tel: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    delivery: Mapped[str] = mapped_column(String(100), nullable=False)
    payment_method: Mapped[str] = mapped_column(String(100), nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    items: Mapped[list["OrderItem"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderItem.id",
    )


class OrderItem(IntPkMixin, Base):
    """Line item of an order."""

    __tablename__ = "order_item"

    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("item.id", ondelete="CASCADE"), nullable=False
    )

    order: Mapped[Order] = relationship(back_populates="items")
    item: Mapped[Item] = relationship(lazy="selectin")
