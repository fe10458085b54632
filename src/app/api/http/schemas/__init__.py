from .product import CreateProductDto, EditProductDto, ProductDto

__all__ = ["CreateProductDto", "EditProductDto", "ProductDto"]
