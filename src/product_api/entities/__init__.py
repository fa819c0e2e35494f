"""Entities module with hybrid entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model exchanged with callers
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core import ApiResponse
from .service.product import (
    Product,
    ProductNotFoundError,
    ProductRepository,
    ProductTable,
)

__all__ = [
    "ApiResponse",
    "Product",
    "ProductNotFoundError",
    "ProductRepository",
    "ProductTable",
]
