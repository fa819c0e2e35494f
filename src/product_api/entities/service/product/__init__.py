"""Entity package: Product."""

from .entity import Product
from .repository import ProductNotFoundError, ProductRepository
from .table import ProductTable

__all__ = ["Product", "ProductNotFoundError", "ProductRepository", "ProductTable"]
