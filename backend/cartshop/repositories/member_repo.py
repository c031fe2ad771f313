"""
repositories/member_repo.py
---------------------------
Data access layer for member records.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cartshop.models.member import Member


class MemberRepository:
    """Read-only queries on the members table."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_all(self) -> list[Member]:
        result = await self.db.execute(select(Member).order_by(Member.id))
        return list(result.scalars().all())

    async def find_id_by_credentials(self, email: str, password: str) -> int | None:
        """
        Look up a member id by exact email and password match.

        Returns:
            The member id or None.
        """
        query = select(Member.id).where(
            Member.email == email,
            Member.password == password,
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()
