"""Abstract repository for the Product entity.

Expressed only in terms of the domain ``Product`` so that callers never
depend on how products are stored.
"""

from abc import ABC, abstractmethod

from .entity import Product


class ProductRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in storage order."""

    @abstractmethod
    def find_active_products(self) -> list[Product]:
        """Return the products whose active flag is set."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_by_slug(self, slug: str) -> Product | None:
        """Return a product by its slug, or None if not found."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert or update a product and return the stored version."""

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """Remove a product. Missing IDs are ignored."""
