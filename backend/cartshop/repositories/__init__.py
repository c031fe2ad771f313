"""
repositories/ - Data Access Layer
==================================
Each repository wraps the SQL for one table and returns ORM records,
ids or affected-row counts. No business rules live here.
"""

from cartshop.repositories.cart_repo import CartRepository
from cartshop.repositories.member_repo import MemberRepository
from cartshop.repositories.product_repo import ProductRepository

__all__ = [
    "CartRepository",
    "MemberRepository",
    "ProductRepository",
]
