"""Product database table model."""

from decimal import Decimal

from sqlmodel import Field

from src.app.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "products"

    name: str = Field(nullable=False)
    price: Decimal = Field(max_digits=18, decimal_places=2, nullable=False)
