"""Tests for the Product entity, table model and API DTOs."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.app.api.http.schemas import CreateProductDto, EditProductDto, ProductDto
from src.app.entities.service.product import Product, ProductTable


class TestProductEntity:
    """Test Product domain entity."""

    def test_product_creation(self):
        product = Product(name="Widget", price=Decimal("9.99"))

        assert product.name == "Widget"
        assert product.price == Decimal("9.99")
        assert product.id is None

    def test_price_is_decimal(self):
        assert Product(name="A", price="12.50").price == Decimal("12.50")

    def test_price_rejects_more_than_two_decimal_places(self):
        with pytest.raises(ValidationError):
            Product(name="Widget", price=Decimal("1.999"))

    def test_name_and_price_are_required(self):
        with pytest.raises(ValidationError):
            Product(price=Decimal("1.00"))
        with pytest.raises(ValidationError):
            Product(name="Widget")

    def test_product_equality(self):
        product1 = Product(id=1, name="Widget", price=Decimal("9.99"))
        product2 = Product(id=1, name="Widget", price=Decimal("9.99"))
        product3 = Product(id=2, name="Widget", price=Decimal("9.99"))

        assert product1 == product2
        assert product1 != product3
        assert hash(product1) == hash(product2)


class TestProductTable:
    def test_table_name_and_columns(self):
        table = ProductTable.__table__

        assert table.name == "products"
        assert set(table.columns.keys()) == {"id", "name", "price"}
        assert table.columns["id"].primary_key
        assert not table.columns["name"].nullable
        assert not table.columns["price"].nullable

    def test_price_column_is_fixed_point(self):
        price_type = ProductTable.__table__.columns["price"].type

        assert price_type.precision == 18
        assert price_type.scale == 2


class TestProductDtos:
    def test_create_dto_has_no_id(self):
        dto = CreateProductDto(name="Widget", price="9.99")
        entity = dto.to_entity()

        assert "id" not in CreateProductDto.model_fields
        assert entity.id is None
        assert entity.name == "Widget"
        assert entity.price == Decimal("9.99")

    def test_edit_dto_carries_id(self):
        entity = EditProductDto(id=3, name="Widget XL", price="12.50").to_entity()

        assert entity == Product(id=3, name="Widget XL", price=Decimal("12.50"))

    def test_product_dto_serializes_price_as_number(self):
        dto = ProductDto.from_entity(Product(id=1, name="Widget", price=Decimal("12.50")))

        assert dto.model_dump(mode="json") == {"id": 1, "name": "Widget", "price": 12.5}
        assert dto.model_dump()["price"] == Decimal("12.50")

    def test_float_prices_keep_their_written_value(self):
        dto = CreateProductDto(name="Widget", price=9.99)

        assert dto.price == Decimal("9.99")

    def test_product_dto_requires_id(self):
        with pytest.raises(ValidationError):
            ProductDto.from_entity(Product(name="Unsaved", price=Decimal("1.00")))

    def test_price_at_digit_limit_serializes_exactly(self):
        dto = ProductDto(id=1, name="Big", price="9999999999999.99")

        assert dto.model_dump_json() == '{"id":1,"name":"Big","price":9999999999999.99}'

    def test_price_beyond_digit_limit_is_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDto(name="Too big", price="99999999999999.99")
