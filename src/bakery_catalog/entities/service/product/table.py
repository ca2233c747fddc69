"""Product database table model."""

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    This represents how a Product is stored in the database. Prices are kept
    as an integer count of cents; the domain model never sees this column.
    """

    __tablename__ = "products"
    __table_args__ = (
        sa.CheckConstraint("price_cents >= 0", name="ck_products_price_cents"),
    )

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=150)
    description: str | None = Field(default=None, sa_type=sa.Text)
    price_cents: int | None = Field(default=None, nullable=False)
    ingredients: str | None = Field(default=None, sa_type=sa.Text)
    story: str | None = Field(default=None, sa_type=sa.Text)
    emoji: str | None = Field(default=None, max_length=16)
    slug: str | None = Field(default=None, max_length=160, unique=True, index=True)
    is_active: bool = Field(default=True, nullable=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=sa.DateTime(timezone=True),
        nullable=False,
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=sa.DateTime(timezone=True),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
