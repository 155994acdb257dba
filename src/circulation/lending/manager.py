"""Lending ledger for checkout and return operations."""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

from ..catalog import Catalog
from ..config import get_config
from ..membership import Membership
from ..notifications import NotificationPort
from .clock import utc_now
from .fees import calculate_fee
from .models import CheckoutResult, Loan, ReturnResult
from .schemas import (
    CheckoutError,
    CheckoutRequest,
    LendingStats,
    ReturnError,
    ReturnRequest,
)

logger = logging.getLogger(__name__)


class LendingLedger:
    """Manages loans between the catalog and the membership desk."""

    def __init__(
        self,
        catalog: Catalog,
        membership: Membership,
        notifier: NotificationPort,
        fee_per_day: Optional[Decimal] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize lending ledger.

        Args:
            catalog: Catalog holding the books
            membership: Membership desk holding the members
            notifier: Port used for checkout and late fee messages
            fee_per_day: Flat late fee per whole day (default: from config)
            clock: Callable returning the current time
        """
        self.catalog = catalog
        self.membership = membership
        self.notifier = notifier
        self.fee_per_day = (
            Decimal(fee_per_day) if fee_per_day is not None else get_config().fee_per_day
        )
        self.clock = clock
        self._loans: list[Loan] = []

    # -------------------------------------------------------------------------
    # Circulation
    # -------------------------------------------------------------------------

    def checkout(self, member_id: int, book_identifier: str, duration_days: int) -> CheckoutResult:
        """Lend an available book to a member.

        Args:
            member_id: Borrowing member
            book_identifier: Catalog identifier of the book
            duration_days: Loan length in days, must be positive

        Returns:
            CheckoutResult with the new loan, or BOOK_UNAVAILABLE /
            MEMBER_NOT_FOUND

        Raises:
            ValidationError: If duration_days is not positive
        """
        request = CheckoutRequest(
            member_id=member_id,
            book_identifier=book_identifier,
            duration_days=duration_days,
        )

        book = self.catalog.find_available(request.book_identifier)
        if book is None:
            logger.info("Checkout refused, book unavailable | identifier=%s", request.book_identifier)
            return CheckoutResult(error=CheckoutError.BOOK_UNAVAILABLE)

        member = self.membership.find_by_id(request.member_id)
        if member is None:
            logger.info("Checkout refused, unknown member | member_id=%s", request.member_id)
            return CheckoutResult(error=CheckoutError.MEMBER_NOT_FOUND)

        now = self.clock()
        self.catalog.mark_unavailable(book.identifier)
        loan = Loan(
            book_identifier=book.identifier,
            member_id=member.member_id,
            checkout_time=now,
            due_time=now + timedelta(days=request.duration_days),
        )
        self._loans.append(loan)
        logger.info(
            "Checkout | loan_id=%s identifier=%s member_id=%s due=%s",
            loan.loan_id,
            loan.book_identifier,
            loan.member_id,
            loan.due_time.isoformat(),
        )

        self.notifier.notify_checkout(member.name, book.title)
        return CheckoutResult(loan=loan)

    def return_book(self, book_identifier: str, member_id: int) -> ReturnResult:
        """Close the open loan of a book held by a member.

        Args:
            book_identifier: Catalog identifier of the book
            member_id: Member returning the book

        Returns:
            ReturnResult with the fee charged (0 when on time), or NO_OPEN_LOAN

        Raises:
            ValidationError: If the identifier is empty or member_id is not an int
        """
        request = ReturnRequest(book_identifier=book_identifier, member_id=member_id)

        index = self._find_open_loan(request.book_identifier, request.member_id)
        if index is None:
            logger.info(
                "Return refused, no open loan | identifier=%s member_id=%s",
                request.book_identifier,
                request.member_id,
            )
            return ReturnResult(error=ReturnError.NO_OPEN_LOAN)

        now = self.clock()
        loan = self._loans[index].close(now)
        self._loans[index] = loan
        self.catalog.mark_available(loan.book_identifier)

        fee = calculate_fee(loan.due_time, now, self.fee_per_day)
        logger.info(
            "Return | loan_id=%s identifier=%s member_id=%s fee=%s",
            loan.loan_id,
            loan.book_identifier,
            loan.member_id,
            fee,
        )

        if fee > 0:
            member = self.membership.find_by_id(loan.member_id)
            if member is None:
                logger.warning(
                    "Late fee not notified, member missing | loan_id=%s member_id=%s fee=%s",
                    loan.loan_id,
                    loan.member_id,
                    fee,
                )
            else:
                self.notifier.notify_late_fee(member.name, fee)

        return ReturnResult(fee=fee, loan=loan)

    def _find_open_loan(self, book_identifier: str, member_id: int) -> Optional[int]:
        for i, loan in enumerate(self._loans):
            if (
                loan.is_open
                and loan.book_identifier == book_identifier
                and loan.member_id == member_id
            ):
                return i
        return None

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def all_loans(self) -> tuple[Loan, ...]:
        """Snapshot of every loan, oldest first."""
        return tuple(self._loans)

    def get_loan(self, loan_id: str) -> Optional[Loan]:
        """Get a loan by id."""
        for loan in self._loans:
            if loan.loan_id == loan_id:
                return loan
        return None

    def open_loans(self) -> tuple[Loan, ...]:
        """Loans whose book is still out."""
        return tuple(loan for loan in self._loans if loan.is_open)

    def overdue_loans(self) -> tuple[Loan, ...]:
        """Open loans past their due time."""
        now = self.clock()
        return tuple(loan for loan in self._loans if loan.is_overdue(now))

    def loans_for_member(self, member_id: int) -> tuple[Loan, ...]:
        """Loan history of a member."""
        return tuple(loan for loan in self._loans if loan.member_id == member_id)

    def loans_for_book(self, book_identifier: str) -> tuple[Loan, ...]:
        """Loan history of a book."""
        return tuple(loan for loan in self._loans if loan.book_identifier == book_identifier)

    def stats(self) -> LendingStats:
        """Get overall lending statistics.

        Returns:
            LendingStats with counts and total fees charged
        """
        now = self.clock()
        closed = [loan for loan in self._loans if not loan.is_open]
        fees = sum(
            (calculate_fee(loan.due_time, loan.return_time, self.fee_per_day) for loan in closed),
            Decimal("0.00"),
        )

        return LendingStats(
            total_loans=len(self._loans),
            open_loans=len(self._loans) - len(closed),
            closed_loans=len(closed),
            overdue_loans=sum(1 for loan in self._loans if loan.is_overdue(now)),
            fees_charged=fees,
        )
