"""Read-only product catalog queries."""

from loguru import logger

from bakery_catalog.core.exceptions import NotFoundError
from bakery_catalog.entities.service.product import Product, ProductRepository


class ProductCatalogService:
    """Retrieval operations over the product catalog.

    Every method is a single repository call; failures from storage are
    passed through untouched.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def get_all(self) -> list[Product]:
        """Return every product, active or not."""
        return self._repository.find_all()

    def get_all_active(self) -> list[Product]:
        """Return only the products visible in the active catalog."""
        return self._repository.find_active_products()

    def get_by_id(self, product_id: int) -> Product:
        """Return a single product.

        Raises:
            NotFoundError: If no product has the given identifier.
        """
        product = self._repository.find_by_id(product_id)
        if product is None:
            logger.debug("Product {} not found", product_id)
            raise NotFoundError("Product", product_id)
        return product
