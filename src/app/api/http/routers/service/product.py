"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from loguru import logger

from src.app.api.http.deps import get_product_repository
from src.app.api.http.schemas import CreateProductDto, EditProductDto, ProductDto
from src.app.entities.service.product import ProductRepository

PRODUCT_NOT_FOUND = "Product not found."
PRODUCT_ID_MISMATCH = "Product ID mismatch."

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=list[ProductDto])
def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> list[ProductDto]:
    """List all products."""
    return [ProductDto.from_entity(product) for product in repository.list_all()]


@router.get(
    "/{product_id}",
    response_model=ProductDto,
    responses={404: {"description": PRODUCT_NOT_FOUND}},
)
def get_product(
    product_id: int,
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductDto:
    """Get a product by ID."""
    product = repository.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    return ProductDto.from_entity(product)


@router.post("", response_model=ProductDto, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: CreateProductDto,
    response: Response,
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductDto:
    """Create a new product."""
    product = payload.to_entity()
    repository.add(product)
    repository.persist()

    logger.info("Created product {}", product.id)
    response.headers["Location"] = f"/products/{product.id}"
    return ProductDto.from_entity(product)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        400: {"description": PRODUCT_ID_MISMATCH},
        404: {"description": PRODUCT_NOT_FOUND},
    },
)
def update_product(
    product_id: int,
    payload: EditProductDto,
    repository: ProductRepository = Depends(get_product_repository),
) -> Response:
    """Replace a product's name and price."""
    # The id check comes first so a mismatch is a 400 whether or not either id exists
    if product_id != payload.id:
        raise HTTPException(status_code=400, detail=PRODUCT_ID_MISMATCH)

    if not repository.update(payload.to_entity()):
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND)
    repository.persist()

    logger.info("Updated product {}", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": PRODUCT_NOT_FOUND}},
)
def delete_product(
    product_id: int,
    repository: ProductRepository = Depends(get_product_repository),
) -> Response:
    """Delete a product."""
    product = repository.get(product_id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    repository.remove(product)
    repository.persist()

    logger.info("Deleted product {}", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
