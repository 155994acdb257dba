"""Library membership module."""

from .manager import DuplicateMemberError, Membership
from .models import Member
from .schemas import MemberCreate

__all__ = [
    "Membership",
    "DuplicateMemberError",
    "Member",
    "MemberCreate",
]
