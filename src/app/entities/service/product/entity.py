"""Entity: Product."""

from decimal import Decimal
from typing import Any

from pydantic import Field

from src.app.entities.core._base import Entity


class Product(Entity):
    """Product entity representing a product in the system.

    This is the domain model handed out by the repository; database rows
    never leave the data access layer.
    """

    name: str = Field(description="Product name")
    price: Decimal = Field(max_digits=18, decimal_places=2, description="Unit price")

    def __eq__(self, other: Any) -> bool:
        """Compare products by identity and business attributes."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.price == other.price
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.name,
            self.price,
        ))
