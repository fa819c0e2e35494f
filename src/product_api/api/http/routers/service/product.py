"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.product_api.api.http.deps import get_db_session, get_product_repository
from src.product_api.entities.core.response import ApiResponse
from src.product_api.entities.service.product import (
    Product,
    ProductNotFoundError,
    ProductRepository,
)

router = APIRouter(prefix="/products", tags=["products"])

INVALID_ID = "Invalid product ID"
INVALID_INPUT = "Invalid input"
NOT_FOUND = "Product not found"

# Largest value a SQLite INTEGER primary key can hold
MAX_PRODUCT_ID = 2**63 - 1


def parse_product_id(raw_id: str) -> int:
    """Parse a path identifier, accepting only non-negative decimal integers
    that fit the store's 64-bit key.
    """
    if raw_id.isascii() and raw_id.isdigit():
        product_id = int(raw_id)
        if product_id <= MAX_PRODUCT_ID:
            return product_id
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID)


async def read_product_body(request: Request) -> Product:
    """Decode the request body as a Product; types are checked strictly."""
    body = await request.body()
    try:
        return Product.model_validate_json(body, strict=True)
    except ValidationError as e:
        logger.debug("Rejected product body: {}", e.errors())
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_INPUT
        ) from e


def _store_error(session: Session, message: str) -> HTTPException:
    session.rollback()
    logger.exception(message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
    )


@router.get("", response_model=ApiResponse)
def list_products(
    session: Session = Depends(get_db_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> ApiResponse:
    """List all active products."""
    try:
        products = repository.list_active()
    except SQLAlchemyError as e:
        raise _store_error(session, "Error fetching products") from e
    return ApiResponse.ok("Products retrieved successfully", products)


@router.get("/{product_id}", response_model=ApiResponse)
def get_product(
    product_id: str,
    session: Session = Depends(get_db_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> ApiResponse:
    """Get an active product by ID."""
    item_id = parse_product_id(product_id)
    try:
        product = repository.get_active(item_id)
    except SQLAlchemyError as e:
        raise _store_error(session, "Error fetching product") from e
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return ApiResponse.ok("Product retrieved successfully", product)


@router.post("", response_model=ApiResponse)
def create_product(
    product: Product = Depends(read_product_body),
    session: Session = Depends(get_db_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> ApiResponse:
    """Create a new product. Any ID in the body is ignored."""
    try:
        created_product = repository.create(product)
        session.commit()
    except SQLAlchemyError as e:
        raise _store_error(session, "Error creating product") from e
    logger.info("Created product {}", created_product.id)
    return ApiResponse.ok("Product created successfully", created_product)


@router.put("/{product_id}", response_model=ApiResponse)
def update_product(
    product_id: str,
    product_update: Product = Depends(read_product_body),
    session: Session = Depends(get_db_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> ApiResponse:
    """Replace a product.

    The path ID wins over any ID in the body. Unless upsert is disabled, an
    unknown ID creates the product.
    """
    product_update.id = parse_product_id(product_id)

    try:
        updated_product = repository.update(product_update)
        session.commit()
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND) from e
    except SQLAlchemyError as e:
        raise _store_error(session, "Error updating product") from e
    logger.info("Updated product {}", updated_product.id)
    return ApiResponse.ok("Product updated successfully", updated_product)


@router.delete("/{product_id}", response_model=ApiResponse)
def delete_product(
    product_id: str,
    session: Session = Depends(get_db_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> ApiResponse:
    """Soft-delete an active product."""
    item_id = parse_product_id(product_id)
    try:
        deleted = repository.delete(item_id)
        session.commit()
    except SQLAlchemyError as e:
        raise _store_error(session, "Error deleting product") from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    logger.info("Deleted product {}", item_id)
    return ApiResponse.ok("Product deleted successfully")
