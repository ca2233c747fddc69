"""Conversion between the Product domain entity and its database row.

Prices are stored as an integer number of cents and exposed to the domain as
an exact ``Decimal`` with two implied fractional digits.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from .entity import Product
from .table import ProductTable


def cents_to_price(cents: int | None) -> Decimal | None:
    """Convert a cent count to a decimal price, keeping ``None`` as ``None``."""
    if cents is None:
        return None
    amount = Decimal(cents)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits))
        return amount.scaleb(-2)


def price_to_cents(price: Decimal | None) -> int | None:
    """Convert a decimal price to whole cents, rounding half up."""
    if price is None:
        return None
    # Context precision must cover every digit or scaleb rounds
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(price.as_tuple().digits))
        cents = price.scaleb(2)
    return int(cents.to_integral_value(rounding=ROUND_HALF_UP))


def to_domain(row: ProductTable | None) -> Product | None:
    """Build a domain Product from a database row."""
    if row is None:
        return None

    return Product(
        id=row.id,
        name=row.name,
        description=row.description,
        price=cents_to_price(row.price_cents),
        ingredients=row.ingredients,
        story=row.story,
        emoji=row.emoji,
        slug=row.slug,
        is_active=row.is_active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_table(product: Product | None) -> ProductTable | None:
    """Build a database row from a domain Product."""
    if product is None:
        return None

    return ProductTable(
        id=product.id,
        name=product.name,
        description=product.description,
        price_cents=price_to_cents(product.price),
        ingredients=product.ingredients,
        story=product.story,
        emoji=product.emoji,
        slug=product.slug,
        is_active=product.is_active,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )
