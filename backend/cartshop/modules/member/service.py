"""
Member Service - Member lookup.
"""

from cartshop.core.exceptions import MemberNotFoundError
from cartshop.models.member import Member
from cartshop.repositories.member_repo import MemberRepository


class MemberService:
    """Resolves members from credentials."""

    def __init__(self, members: MemberRepository) -> None:
        self.members = members

    async def list_members(self) -> list[Member]:
        """Get all members."""
        return await self.members.find_all()

    async def resolve_member(self, email: str, password: str) -> int:
        """
        Find the id of the member with these credentials.

        Raises:
            MemberNotFoundError: No member matches. Whether the email or the
                password was wrong is not reported.
        """
        member_id = await self.members.find_id_by_credentials(email, password)
        if member_id is None:
            raise MemberNotFoundError()
        return member_id
