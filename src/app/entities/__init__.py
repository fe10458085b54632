"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model handed to the API layer
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.product import Product, ProductRepository, ProductTable

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
]
