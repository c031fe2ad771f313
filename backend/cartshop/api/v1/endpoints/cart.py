"""
Cart API Endpoints.

Every route acts on the cart of the member identified by HTTP Basic
credentials.
"""

from typing import Any

from fastapi import APIRouter, Depends, Response, status

from cartshop.api.deps import ProductId, get_cart_service, get_current_member_id
from cartshop.core.config import settings
from cartshop.modules.shop import CartService

router = APIRouter()


@router.get("")
async def get_cart(
    member_id: int = Depends(get_current_member_id),
    cart: CartService = Depends(get_cart_service),
) -> list[dict[str, Any]]:
    """Get products in the member's cart."""
    products = await cart.list_cart_products(member_id)
    return [product.to_dict() for product in products]


@router.post("/{product_id}", status_code=status.HTTP_201_CREATED)
async def add_to_cart(
    product_id: ProductId,
    member_id: int = Depends(get_current_member_id),
    cart: CartService = Depends(get_cart_service),
) -> Response:
    """Add a product to the member's cart."""
    await cart.add_to_cart(member_id, product_id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{settings.api_prefix}/cart"},
    )


@router.delete("/{product_id}")
async def remove_from_cart(
    product_id: ProductId,
    member_id: int = Depends(get_current_member_id),
    cart: CartService = Depends(get_cart_service),
) -> Response:
    """Remove a product from the member's cart."""
    await cart.remove_from_cart(member_id, product_id)
    return Response(status_code=status.HTTP_200_OK)
