"""
repositories/product_repo.py
----------------------------
Data access layer for the `products` table.
"""

from loguru import logger
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from cartshop.models.shop import Product


class ProductRepository:
    """Repository for CRUD operations on the products table."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # ==================== Create ====================

    async def insert(self, name: str, price: int, image: str) -> int:
        """
        Insert a new product.

        Returns:
            The generated product id.
        """
        product = Product(name=name, price=price, image=image)
        self.db.add(product)
        await self.db.flush()
        logger.info(f"Inserted product #{product.id}")
        return product.id

    # ==================== Read ====================

    async def select_all(self) -> list[Product]:
        """Fetch every product in storage order."""
        result = await self.db.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    async def find_by_id(self, product_id: int) -> Product | None:
        """Fetch a single product by primary key."""
        query = select(Product).where(Product.id == product_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    # ==================== Update ====================

    async def update(self, product_id: int, name: str, price: int, image: str) -> int:
        """
        Overwrite all mutable columns of a product.

        Returns:
            Number of affected rows.
        """
        query = (
            update(Product)
            .where(Product.id == product_id)
            .values(name=name, price=price, image=image)
        )
        result = await self.db.execute(query)
        return result.rowcount

    # ==================== Delete ====================

    async def delete(self, product_id: int) -> int:
        """
        Delete a product by id.

        Returns:
            Number of affected rows.
        """
        result = await self.db.execute(delete(Product).where(Product.id == product_id))
        if result.rowcount:
            logger.info(f"Deleted product #{product_id}")
        return result.rowcount
