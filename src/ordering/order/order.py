"""Order record and its social-share events.

The order's primary key is the payment gateway's order id. Orders are never
created without a matching remote payment order, and the two ids are never
generated independently.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.db import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class OrderStatus(Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class SocialShare(Base):
    __tablename__ = "order_social_shares"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[str] = mapped_column(ForeignKey("orders.order_id", ondelete="CASCADE"), index=True)
    platform: Mapped[str] = mapped_column(String(50))
    shared_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


class Order(Base):
    __tablename__ = "orders"

    order_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    product_id: Mapped[str] = mapped_column(String(64), index=True)
    product_name: Mapped[str] = mapped_column(String(255))
    product_category: Mapped[str | None] = mapped_column(String(100), default=None)
    customer_email: Mapped[str] = mapped_column(String(320))
    customer_name: Mapped[str] = mapped_column(String(255))
    amount: Mapped[int] = mapped_column(Integer)
    status: Mapped[str] = mapped_column(String(20), default=OrderStatus.CONFIRMED.value)
    payment_status: Mapped[str] = mapped_column(String(20), default=PaymentStatus.PENDING.value)
    shared_on_social: Mapped[bool] = mapped_column(Boolean, default=False)
    social_shares: Mapped[list[SocialShare]] = relationship(
        order_by=SocialShare.id,
        cascade="save-update, merge",
        lazy="selectin",
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


@dataclass(frozen=True)
class OrderData:
    """Everything needed to persist a new order, denormalized at checkout time."""

    order_id: str
    product_id: str
    product_name: str
    product_category: str | None
    customer_email: str
    customer_name: str
    amount: int
