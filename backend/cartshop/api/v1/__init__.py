"""
API Version 1 Router.

Combines all API endpoints under the configured API prefix.
"""

from fastapi import APIRouter

from cartshop.api.v1.endpoints import cart, members, products

router = APIRouter()

# Include endpoint routers
router.include_router(products.router, prefix="/products", tags=["Products"])
router.include_router(members.router, prefix="/members", tags=["Members"])
router.include_router(cart.router, prefix="/cart", tags=["Cart"])
