"""
Domain exceptions.

Raised by services when a business rule is violated. The API layer maps
every ``BusinessRuleError`` to a 400 response carrying its message.
"""


class BusinessRuleError(ValueError):
    """Base class for errors caused by the request targeting invalid data."""

    default_message = "잘못된 요청입니다."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ProductNotFoundError(BusinessRuleError):
    """The requested product does not exist."""

    default_message = "찾는 상품이 없습니다."


class MemberNotFoundError(BusinessRuleError):
    """No member matches the supplied credentials."""

    default_message = "회원 정보가 일치하지 않습니다."


class DuplicateCartItemError(BusinessRuleError):
    """The product is already in the member's cart."""

    default_message = "카트에 이미 존재하는 상품입니다."


class AffectedRowsError(BusinessRuleError):
    """A mutating statement touched no rows."""

    default_message = "접근하려는 데이터가 존재하지 않습니다."
