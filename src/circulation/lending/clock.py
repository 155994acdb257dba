"""Clocks for the lending ledger."""

from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class SimulatedClock:
    """Clock that starts at a fixed instant and only moves when told to.

    Used by the demo to play out late returns, and handy in tests.
    """

    def __init__(self, start: Optional[datetime] = None):
        self.now = start or utc_now()

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 0, hours: int = 0) -> datetime:
        """Move the clock forward and return the new time."""
        self.now += timedelta(days=days, hours=hours)
        return self.now
