"""Response models returned by the HTTP API."""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bakery_catalog.entities.service.product import Product


class ProductResponse(BaseModel):
    """Public representation of a catalog product."""

    id: int
    name: str
    description: str | None = None
    price: Decimal | None = None
    ingredients: str | None = None
    story: str | None = None
    emoji: str | None = None

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            ingredients=product.ingredients,
            story=product.story,
            emoji=product.emoji,
        )


class ErrorResponse(BaseModel):
    """Body returned for every handled error."""

    message: str
    status: int
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
