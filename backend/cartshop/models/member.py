"""
Member model used for cart ownership and Basic authentication.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cartshop.core.database import Base

if TYPE_CHECKING:
    from cartshop.models.shop import CartItem


class Member(Base):
    """Member account.

    Passwords are stored as given; they are compared verbatim on lookup and
    never returned by the API.
    """

    __tablename__ = "members"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255))

    # Relationships
    cart_items: Mapped[list["CartItem"]] = relationship(
        back_populates="member", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Member {self.email}>"
