"""
repositories/cart_repo.py
-------------------------
Data access layer for the `cart_items` table.
"""

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from cartshop.models.shop import CartItem, Product

# Supported dialects, all with INSERT ... ON CONFLICT DO NOTHING
_CONFLICT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class CartRepository:
    """Repository for member cart entries."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # ==================== Read ====================

    async def find_products_by_member_id(self, member_id: int) -> list[Product]:
        """Products currently in the member's cart, ordered by product id."""
        query = (
            select(Product)
            .join(CartItem, CartItem.product_id == Product.id)
            .where(CartItem.member_id == member_id)
            .order_by(Product.id)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    # ==================== Write ====================

    async def add(self, member_id: int, product_id: int) -> int:
        """
        Insert a (member, product) pair unless it already exists.

        The check and the insert are a single statement, so the primary key
        decides between concurrent adds.

        Returns:
            1 if the row was inserted, 0 if the pair was already present.
        """
        table = CartItem.__table__
        values = {"member_id": member_id, "product_id": product_id}
        dialect = self.db.get_bind().dialect.name

        query = (
            _CONFLICT_INSERTS[dialect](table)
            .values(**values)
            .on_conflict_do_nothing(index_elements=["member_id", "product_id"])
        )
        result = await self.db.execute(query)
        return result.rowcount

    async def delete(self, member_id: int, product_id: int) -> int:
        """
        Remove a (member, product) pair.

        Returns:
            Number of affected rows.
        """
        query = delete(CartItem).where(
            CartItem.member_id == member_id,
            CartItem.product_id == product_id,
        )
        result = await self.db.execute(query)
        return result.rowcount
