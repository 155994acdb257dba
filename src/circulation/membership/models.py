"""Membership records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """A registered library member."""

    name: str
    member_id: int
