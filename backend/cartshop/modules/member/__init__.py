"""
Member Module - Member lookup and credential resolution.
"""

from cartshop.modules.member.service import MemberService

__all__ = ["MemberService"]
