"""Entities module with hybrid entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- mapper.py: Conversion between the two
- repository.py: Data access contract in domain terms
- sql_repository.py: SQLModel-backed implementation of the contract
"""

from .service.product import (
    Product,
    ProductRepository,
    ProductTable,
    SqlProductRepository,
)

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
    "SqlProductRepository",
]
