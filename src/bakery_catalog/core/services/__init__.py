"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .product.product_catalog import ProductCatalogService

__all__ = [
    "DbManageService",
    "DbSessionService",
    "ProductCatalogService",
]
