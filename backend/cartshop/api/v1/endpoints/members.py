"""
Member API Endpoints.
"""

from typing import Any

from fastapi import APIRouter, Depends

from cartshop.api.deps import get_member_service
from cartshop.modules.member import MemberService

router = APIRouter()


@router.get("")
async def list_members(
    members: MemberService = Depends(get_member_service),
) -> list[dict[str, Any]]:
    """Get all members. Passwords are never exposed."""
    return [
        {"id": member.id, "email": member.email}
        for member in await members.list_members()
    ]
