"""Pydantic response schemas for the Catalogue API."""

from pydantic import BaseModel, ConfigDict, Field

from catalogue.product.product import ProductSnapshot


class ProductResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str | None = None
    price: int
    category: str | None = None
    is_active: bool = Field(alias="isActive")
    inventory: int
    featured: bool

    @classmethod
    def from_snapshot(cls, product: ProductSnapshot) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            is_active=product.is_active,
            inventory=product.inventory,
            featured=product.featured,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
