"""
Shop models.

Includes:
- Products
- Cart items (member/product pairs)
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cartshop.core.database import Base

if TYPE_CHECKING:
    from cartshop.models.member import Member


class Product(Base):
    """Product for sale."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    price: Mapped[int] = mapped_column(Integer)
    image: Mapped[str] = mapped_column(Text)

    # Relationships
    cart_items: Mapped[list["CartItem"]] = relationship(
        back_populates="product", passive_deletes=True
    )

    def to_dict(self) -> dict[str, int | str]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "image": self.image,
        }

    def __repr__(self) -> str:
        return f"<Product {self.id}: {self.name}>"


class CartItem(Base):
    """A product placed in a member's cart.

    The composite primary key makes each (member, product) pair unique.
    """

    __tablename__ = "cart_items"

    member_id: Mapped[int] = mapped_column(
        ForeignKey("members.id", ondelete="CASCADE"), primary_key=True
    )
    product_id: Mapped[int] = mapped_column(
        ForeignKey("products.id", ondelete="CASCADE"), primary_key=True
    )

    # Relationships
    member: Mapped["Member"] = relationship(back_populates="cart_items")
    product: Mapped["Product"] = relationship(back_populates="cart_items")

    def __repr__(self) -> str:
        return f"<CartItem member={self.member_id} product={self.product_id}>"
