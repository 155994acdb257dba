"""Loan records and lending results."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from .fees import days_late
from .schemas import CheckoutError, LoanStatus, ReturnError


def generate_uuid() -> str:
    """Generate a UUID string for loan ids."""
    return str(uuid4())


@dataclass(frozen=True)
class Loan:
    """A single loan of one book to one member.

    A loan is open until ``return_time`` is set, and closed for good after.
    """

    book_identifier: str
    member_id: int
    checkout_time: datetime
    due_time: datetime
    return_time: Optional[datetime] = None
    loan_id: str = field(default_factory=generate_uuid)

    @property
    def status(self) -> LoanStatus:
        """Open while the book is out, closed once returned."""
        return LoanStatus.OPEN if self.return_time is None else LoanStatus.CLOSED

    @property
    def is_open(self) -> bool:
        """Check if the book is still out."""
        return self.return_time is None

    def is_overdue(self, now: datetime) -> bool:
        """Check if an open loan is past its due time."""
        return self.is_open and now > self.due_time

    def days_overdue(self, now: datetime) -> int:
        """Whole days past due, measured at return time for closed loans."""
        return days_late(self.due_time, self.return_time or now)

    def close(self, when: datetime) -> "Loan":
        """Return a closed copy of this loan.

        Raises:
            ValueError: If the loan is already closed
        """
        if not self.is_open:
            raise ValueError(f"Loan {self.loan_id} is already closed")
        return replace(self, return_time=when)


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of a checkout: either a new loan or the reason it was refused."""

    loan: Optional[Loan] = None
    error: Optional[CheckoutError] = None

    @property
    def success(self) -> bool:
        """Check if the checkout went through."""
        return self.error is None

    @property
    def loan_id(self) -> Optional[str]:
        """Handle of the new loan, None when refused."""
        return self.loan.loan_id if self.loan else None


@dataclass(frozen=True)
class ReturnResult:
    """Outcome of a return: the fee charged, or the reason it was refused.

    ``fee`` is only set on success, so a refused return can never be read
    as a free one.
    """

    fee: Optional[Decimal] = None
    loan: Optional[Loan] = None
    error: Optional[ReturnError] = None

    @property
    def success(self) -> bool:
        """Check if an open loan was closed."""
        return self.error is None

    @property
    def was_late(self) -> bool:
        """Check if a fee was charged."""
        return bool(self.fee)
