"""Membership manager for member registration and lookup."""

import logging
from typing import Optional

from ..notifications import NotificationPort
from .models import Member
from .schemas import MemberCreate

logger = logging.getLogger(__name__)


class DuplicateMemberError(ValueError):
    """Raised when registering a member id that is already taken."""

    pass


class Membership:
    """Owns the set of registered members."""

    def __init__(self, notifier: NotificationPort):
        """Initialize membership desk.

        Args:
            notifier: Port used to send the welcome message
        """
        self.notifier = notifier
        self._members: dict[int, Member] = {}

    def register(self, name: str, member_id: int) -> Member:
        """Register a member and send a welcome message.

        The member stays registered even if the welcome message fails.

        Args:
            name: Member name
            member_id: Unique member id

        Returns:
            The registered member

        Raises:
            DuplicateMemberError: If the id is already registered
            ValidationError: If the name is empty
        """
        data = MemberCreate(name=name, member_id=member_id)

        if data.member_id in self._members:
            raise DuplicateMemberError(f"Member already exists: {data.member_id}")

        member = Member(name=data.name, member_id=data.member_id)
        self._members[member.member_id] = member
        logger.info("Member registered | member_id=%s name=%s", member.member_id, member.name)

        self.notifier.notify_welcome(member.name)
        return member

    def find_by_id(self, member_id: int) -> Optional[Member]:
        """Get a member by id."""
        return self._members.get(member_id)

    def all_members(self) -> tuple[Member, ...]:
        """Snapshot of every member, in registration order."""
        return tuple(self._members.values())

    def __len__(self) -> int:
        return len(self._members)
