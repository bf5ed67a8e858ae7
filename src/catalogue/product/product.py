"""Product table and the immutable snapshot handed to other contexts."""

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.db import Base


def new_product_id() -> str:
    """24 hex characters, the same shape as the ids the storefront already links to."""
    return secrets.token_hex(12)


class Product(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_product_id)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, default=None)
    # Minor currency units (paise for INR).
    price: Mapped[int] = mapped_column(Integer)
    category: Mapped[str | None] = mapped_column(String(100), default=None)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    inventory: Mapped[int] = mapped_column(Integer, default=0)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(UTC))

    def snapshot(self) -> "ProductSnapshot":
        return ProductSnapshot(
            id=self.id,
            name=self.name,
            description=self.description,
            price=self.price,
            category=self.category,
            is_active=self.is_active,
            inventory=self.inventory,
            featured=self.featured,
        )


@dataclass(frozen=True)
class ProductSnapshot:
    id: str
    name: str
    description: str | None
    price: int
    category: str | None
    is_active: bool
    inventory: int
    featured: bool
