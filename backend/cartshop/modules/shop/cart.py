"""
Cart Service - Member cart management backed by the cart_items table.
"""

from loguru import logger

from cartshop.core.exceptions import DuplicateCartItemError, ProductNotFoundError
from cartshop.models.shop import Product
from cartshop.repositories.cart_repo import CartRepository
from cartshop.repositories.product_repo import ProductRepository


class CartService:
    """
    Shopping cart service.

    A cart is the set of (member, product) pairs stored for a member.

    Usage:
        cart = CartService(CartRepository(db), ProductRepository(db))
        await cart.add_to_cart(member_id, product_id)
        products = await cart.list_cart_products(member_id)
    """

    def __init__(self, carts: CartRepository, products: ProductRepository) -> None:
        self.carts = carts
        self.products = products

    async def list_cart_products(self, member_id: int) -> list[Product]:
        """Get the products in the member's cart."""
        return await self.carts.find_products_by_member_id(member_id)

    async def add_to_cart(self, member_id: int, product_id: int) -> None:
        """
        Put a product into the member's cart.

        Raises:
            ProductNotFoundError: The product does not exist.
            DuplicateCartItemError: The product is already in the cart.
        """
        if await self.products.find_by_id(product_id) is None:
            raise ProductNotFoundError()

        inserted = await self.carts.add(member_id, product_id)
        if not inserted:
            raise DuplicateCartItemError()

        logger.info(f"Added product #{product_id} to cart of member #{member_id}")

    async def remove_from_cart(self, member_id: int, product_id: int) -> None:
        """Remove a product from the member's cart. Missing pairs are ignored."""
        removed = await self.carts.delete(member_id, product_id)
        if removed:
            logger.info(
                f"Removed product #{product_id} from cart of member #{member_id}"
            )
        else:
            logger.debug(
                f"Product #{product_id} was not in cart of member #{member_id}"
            )
