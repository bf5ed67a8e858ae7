"""FastAPI routes for the Catalogue domain."""

from fastapi import APIRouter, Depends

from catalogue.api.schemas import ProductResponse
from catalogue.domain import logger
from catalogue.product.catalog import ProductCatalog
from shared import responses
from shared.db import get_session_factory
from shared.errors import NotFoundError, ProductNotFoundError

product_router = APIRouter(prefix="/products", tags=["products"])


def get_catalog() -> ProductCatalog:
    return ProductCatalog(get_session_factory())


@product_router.get("")
async def list_products(featured: bool | None = None, catalog: ProductCatalog = Depends(get_catalog)):
    """List products, optionally filtered by the featured flag."""
    products = await catalog.list_products(featured=featured)
    if not products:
        logger.warning("No products found", featured=featured)
        raise NotFoundError("No products matched the query", client_message="No products found")

    logger.info("Products fetched", count=len(products), featured=featured)
    return responses.success(
        "Products fetched successfully",
        [ProductResponse.from_snapshot(product).to_json() for product in products],
    )


@product_router.get("/{product_id}")
async def get_product(product_id: str, catalog: ProductCatalog = Depends(get_catalog)):
    product = await catalog.get_product(product_id)
    if product is None:
        raise ProductNotFoundError(f"Product {product_id} not found")

    return responses.success("Product fetched successfully", ProductResponse.from_snapshot(product).to_json())
