"""Entity: Product."""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Product entity representing a bakery item in the catalog.

    This is the domain model used by business logic. ``id`` stays ``None``
    until the product has been persisted for the first time. ``price`` is an
    exact decimal amount; it is never a float.
    """

    id: int | None = Field(default=None, description="Identifier assigned by storage")
    name: str = Field(description="Display name of the product")
    description: str | None = Field(default=None, description="Long description")
    price: Decimal | None = Field(
        default=None, ge=0, allow_inf_nan=False, description="Price in currency units"
    )
    ingredients: str | None = Field(default=None, description="Ingredient list")
    story: str | None = Field(default=None, description="Background story of the item")
    emoji: str | None = Field(default=None, description="Emoji shown next to the name")
    slug: str | None = Field(default=None, description="Unique URL-friendly name")
    is_active: bool = Field(default=True, description="Visible in the active catalog")

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def __eq__(self, other: object) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return self._business_key() == other._business_key()

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash(self._business_key())

    def _business_key(self) -> tuple:
        return (
            self.id,
            self.name,
            self.description,
            self.price,
            self.ingredients,
            self.story,
            self.emoji,
            self.slug,
            self.is_active,
        )
