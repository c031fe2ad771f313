"""
Request-scoped service wiring.

Services are composed explicitly from repositories sharing the request's
database session.
"""

from typing import Annotated

from fastapi import Depends, Path
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from cartshop.core.database import get_db
from cartshop.modules.member import MemberService
from cartshop.modules.shop import CartService, ProductService
from cartshop.repositories import CartRepository, MemberRepository, ProductRepository

# Range of the INTEGER columns backing ids and prices
INT4_MIN = -2_147_483_648
INT4_MAX = 2_147_483_647

ProductId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]

basic_auth = HTTPBasic(realm="cart")


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db))


def get_member_service(db: AsyncSession = Depends(get_db)) -> MemberService:
    return MemberService(MemberRepository(db))


def get_cart_service(db: AsyncSession = Depends(get_db)) -> CartService:
    return CartService(CartRepository(db), ProductRepository(db))


async def get_current_member_id(
    credentials: HTTPBasicCredentials = Depends(basic_auth),
    members: MemberService = Depends(get_member_service),
) -> int:
    """Resolve the Basic auth credentials to a member id."""
    return await members.resolve_member(credentials.username, credentials.password)
