"""SQLModel-backed implementation of ProductRepository."""

from loguru import logger
from sqlmodel import Session, select

from .entity import Product
from .mapper import to_domain, to_table
from .repository import ProductRepository
from .table import ProductTable


class SqlProductRepository(ProductRepository):
    """Data-access layer for products.

    Flushes changes so that generated values are visible, but leaves
    committing to whoever owns the session.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def find_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(ProductTable.id)
        rows = self._session.exec(statement).all()
        logger.debug("Loaded {} products", len(rows))
        return [to_domain(row) for row in rows]

    def find_active_products(self) -> list[Product]:
        statement = (
            select(ProductTable)
            .where(ProductTable.is_active == True)  # noqa: E712
            .order_by(ProductTable.id)
        )
        rows = self._session.exec(statement).all()
        logger.debug("Loaded {} active products", len(rows))
        return [to_domain(row) for row in rows]

    def find_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            logger.debug("No product with id {}", product_id)
        return to_domain(row)

    def find_by_slug(self, slug: str) -> Product | None:
        statement = select(ProductTable).where(ProductTable.slug == slug)
        row = self._session.exec(statement).first()
        return to_domain(row)

    def save(self, product: Product) -> Product:
        """Insert a new product or update the stored one with the same id.

        On update the stored timestamps win over the ones on ``product``:
        ``created_at`` is kept and ``updated_at`` is refreshed by storage.
        """
        row = to_table(product)
        if row.id is None:
            self._session.add(row)
        else:
            stored = self._session.get(ProductTable, row.id)
            if stored is not None:
                row.created_at = stored.created_at
                row.updated_at = stored.updated_at
            row = self._session.merge(row)
        self._session.flush()
        self._session.refresh(row)
        logger.debug("Saved product {} ({})", row.id, row.slug)
        return to_domain(row)

    def delete_by_id(self, product_id: int) -> None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            logger.debug("Delete skipped, no product with id {}", product_id)
            return
        self._session.delete(row)
        self._session.flush()
        logger.debug("Deleted product {}", product_id)
