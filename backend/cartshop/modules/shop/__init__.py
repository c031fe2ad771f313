"""
Shop Module - Product catalog and member carts.

Features:
- Product CRUD with partial updates
- Per-member cart with duplicate protection
"""

from cartshop.modules.shop.cart import CartService
from cartshop.modules.shop.service import ProductPatch, ProductService

__all__ = [
    "CartService",
    "ProductPatch",
    "ProductService",
]
