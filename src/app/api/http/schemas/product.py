"""Request and response shapes for the products API."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

from src.app.entities.service.product import Product

# Validated as Decimal, written to JSON as a number. 15 significant digits
# is what a double (and the SQLite REAL behind NUMERIC) carries exactly.
PRICE_MAX_DIGITS = 15

Price = Annotated[
    Decimal,
    BeforeValidator(lambda v: str(v) if isinstance(v, float) else v),
    Field(max_digits=PRICE_MAX_DIGITS, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductDto(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: Price

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDto":
        return cls.model_validate(product)


class CreateProductDto(BaseModel):
    """Payload for creating a product; the id is assigned by the server."""

    name: str
    price: Price

    def to_entity(self) -> Product:
        return Product(name=self.name, price=self.price)


class EditProductDto(BaseModel):
    """Payload for replacing a product's name and price."""

    id: int
    name: str
    price: Price

    def to_entity(self) -> Product:
        return Product(id=self.id, name=self.name, price=self.price)
