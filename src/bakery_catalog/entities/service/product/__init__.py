"""Entity package: Product."""

from .entity import Product
from .repository import ProductRepository
from .sql_repository import SqlProductRepository
from .table import ProductTable

__all__ = ["Product", "ProductRepository", "ProductTable", "SqlProductRepository"]
