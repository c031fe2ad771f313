"""
Product Service - Product catalog management.
"""

from dataclasses import dataclass

from loguru import logger

from cartshop.core.exceptions import AffectedRowsError, ProductNotFoundError
from cartshop.models.shop import Product
from cartshop.repositories.product_repo import ProductRepository

MINIMUM_AFFECTED_ROWS = 1


@dataclass(frozen=True)
class ProductPatch:
    """
    Partial product update.

    A field set to None is absent and keeps the stored value.
    """

    name: str | None = None
    price: int | None = None
    image: str | None = None

    def merge(self, product: Product) -> tuple[str, int, str]:
        """Return (name, price, image) with absent fields taken from product."""
        return (
            product.name if self.name is None else self.name,
            product.price if self.price is None else self.price,
            product.image if self.image is None else self.image,
        )


class ProductService:
    """
    Service for managing products.

    Usage:
        products = ProductService(ProductRepository(db_session))
        await products.update(1, ProductPatch(price=1000))
    """

    def __init__(self, products: ProductRepository) -> None:
        self.products = products

    async def list_all(self) -> list[Product]:
        """Get all products in storage order."""
        return await self.products.select_all()

    async def create(self, name: str, price: int, image: str) -> int:
        """Create new product and return its id."""
        return await self.products.insert(name=name, price=price, image=image)

    async def update(self, product_id: int, patch: ProductPatch) -> None:
        """
        Apply a partial update to an existing product.

        Raises:
            ProductNotFoundError: No product with this id.
            AffectedRowsError: The row vanished before the write.
        """
        product = await self.products.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError()

        name, price, image = patch.merge(product)
        updated_rows = await self.products.update(product_id, name, price, image)
        _validate_affected_rows(updated_rows)
        logger.info(f"Updated product #{product_id}")

    async def delete(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            AffectedRowsError: No product with this id.
        """
        affected_rows = await self.products.delete(product_id)
        _validate_affected_rows(affected_rows)


def _validate_affected_rows(affected_rows: int) -> None:
    if affected_rows < MINIMUM_AFFECTED_ROWS:
        raise AffectedRowsError()
