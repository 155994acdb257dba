"""Late fee calculation.

Fees are charged per whole day past the due time at a flat rate. Partial
days are not charged: a return 2 days and 23 hours late counts as 2 days.
"""

from datetime import datetime
from decimal import Decimal

from ..money import to_cents


def days_late(due_time: datetime, returned_at: datetime) -> int:
    """Whole days elapsed past the due time (0 if on time or early)."""
    if returned_at <= due_time:
        return 0
    return (returned_at - due_time).days


def calculate_fee(due_time: datetime, returned_at: datetime, fee_per_day: Decimal) -> Decimal:
    """Late fee for a return at ``returned_at``.

    Args:
        due_time: When the loan was due
        returned_at: When the book came back
        fee_per_day: Flat amount charged per whole day late

    Returns:
        Fee rounded to cents, ``Decimal("0.00")`` when not late
    """
    return to_cents(Decimal(days_late(due_time, returned_at)) * Decimal(fee_per_day))
