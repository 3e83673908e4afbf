"""Order models for campus food orders."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.utils.identifiers import new_record_id

ORDER_STATUSES: tuple[str, ...] = (
    "pending",
    "accepted",
    "preparing",
    "ready",
    "out-for-delivery",
    "delivered",
    "cancelled",
)


class Order(Base):
    """Order submitted by a student for delivery on their campus.

    The cart is kept twice: ``cart_items`` is the display string older
    consumers read, ``cart_items_array`` is the structured line-item list used
    for per-restaurant views. ``timestamp`` is the display time frozen at
    creation; ``created_at`` is the sortable instant.
    """

    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_record_id)
    university_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    university_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    campus_id: Mapped[str] = mapped_column(String(64), nullable=False)
    campus_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    gender: Mapped[str] = mapped_column(String(8), nullable=False)
    persons: Mapped[int | None] = mapped_column(Integer, nullable=True)
    delivery_charge: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    item_total: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    grand_total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    cart_items: Mapped[str | None] = mapped_column(Text, nullable=True)
    cart_items_array: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    restaurant_names: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    timestamp: Mapped[str | None] = mapped_column(String(64), nullable=True)
    account_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bank_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    screenshot_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    special_instruction: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="pending")

    restaurant_links: Mapped[list["OrderRestaurantLink"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("ix_orders_campus_created_at", "campus_id", "created_at"),
        Index("ix_orders_phone_created_at", "phone", "created_at"),
    )


class OrderRestaurantLink(Base):
    """Restaurant referenced by an order, derived from its cart at insert time."""

    __tablename__ = "order_restaurant_links"

    id: Mapped[int] = mapped_column(primary_key=True)
    order_id: Mapped[str] = mapped_column(ForeignKey("orders.id"), nullable=False, index=True)
    restaurant_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    restaurant_name: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)

    order: Mapped[Order] = relationship(back_populates="restaurant_links")
