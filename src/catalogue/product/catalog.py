"""Product Catalog — lookup by id and listing by featured flag.

The catalog is read-only from the checkout's point of view. ``add_product``
exists for seeding and administration only.
"""

import re

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalogue.domain import logger
from catalogue.product.product import Product, ProductSnapshot
from shared.transaction import TransactionContext

PRODUCT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def is_valid_product_id(product_id: object) -> bool:
    return isinstance(product_id, str) and PRODUCT_ID_PATTERN.fullmatch(product_id) is not None


class ProductCatalog:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_product(self, product_id: str, tx: TransactionContext | None = None) -> ProductSnapshot | None:
        """Return a snapshot of the product, or None when absent or malformed.

        When a transaction context is given the read happens inside it, so
        the checkout sees the same database state it later writes against.
        """
        if not is_valid_product_id(product_id):
            return None

        if tx is not None:
            product = await tx.session.get(Product, product_id)
            return product.snapshot() if product else None

        async with self._session_factory() as session:
            product = await session.get(Product, product_id)
            return product.snapshot() if product else None

    async def list_products(self, featured: bool | None = None) -> list[ProductSnapshot]:
        stmt = select(Product).order_by(Product.created_at, Product.id)
        if featured is not None:
            stmt = stmt.where(Product.featured == featured)

        async with self._session_factory() as session:
            result = await session.scalars(stmt)
            return [product.snapshot() for product in result]

    async def add_product(
        self,
        name: str,
        price: int,
        description: str | None = None,
        category: str | None = None,
        is_active: bool = True,
        inventory: int = 0,
        featured: bool = False,
        product_id: str | None = None,
    ) -> ProductSnapshot:
        if product_id is not None and not is_valid_product_id(product_id):
            raise ValueError(f"Invalid product id: {product_id!r}")
        if price < 0:
            raise ValueError("Product price cannot be negative")

        product = Product(
            name=name,
            price=price,
            description=description,
            category=category,
            is_active=is_active,
            inventory=inventory,
            featured=featured,
        )
        if product_id is not None:
            product.id = product_id

        async with self._session_factory() as session, session.begin():
            session.add(product)

        logger.info("Product added", product_id=product.id, name=name, price=price)
        return product.snapshot()
