"""
Product API Endpoints.

Product catalog management: list, create, partial update, delete.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from cartshop.api.deps import INT4_MAX, INT4_MIN, ProductId, get_product_service
from cartshop.core.config import settings
from cartshop.modules.shop import ProductPatch, ProductService

router = APIRouter()


# ==================== Schemas ====================


# Booleans are rejected rather than coerced to 0/1
Price = Annotated[int, Field(strict=True, ge=INT4_MIN, le=INT4_MAX)]


class ProductCreateRequest(BaseModel):
    """Create new product. All fields are required."""

    name: str
    price: Price
    image: str


class ProductUpdateRequest(BaseModel):
    """Update product. Omitted or null fields keep their current value."""

    name: str | None = None
    price: Price | None = None
    image: str | None = None

    def to_patch(self) -> ProductPatch:
        return ProductPatch(**self.model_dump(exclude_unset=True, exclude_none=True))


# ==================== Products ====================


@router.get("")
async def list_products(
    products: ProductService = Depends(get_product_service),
) -> list[dict[str, Any]]:
    """Get all products."""
    return [product.to_dict() for product in await products.list_all()]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreateRequest,
    products: ProductService = Depends(get_product_service),
) -> Response:
    """
    Create a product.

    The Location header points at the product collection.
    """
    await products.create(request.name, request.price, request.image)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{settings.api_prefix}/products"},
    )


@router.put("/{product_id}")
async def update_product(
    product_id: ProductId,
    request: ProductUpdateRequest,
    products: ProductService = Depends(get_product_service),
) -> Response:
    """Apply a partial update to a product."""
    await products.update(product_id, request.to_patch())
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{product_id}")
async def delete_product(
    product_id: ProductId,
    products: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    await products.delete(product_id)
    return Response(status_code=status.HTTP_200_OK)
