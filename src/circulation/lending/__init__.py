"""Lending ledger module.

Provides functionality for:
- Checking books out to members
- Returning books and charging late fees
- Loan history and overdue queries
"""

from ..money import format_amount
from .clock import SimulatedClock, utc_now
from .fees import calculate_fee, days_late
from .manager import LendingLedger
from .models import CheckoutResult, Loan, ReturnResult
from .schemas import (
    CheckoutError,
    CheckoutRequest,
    LendingStats,
    LoanStatus,
    ReturnError,
    ReturnRequest,
)

__all__ = [
    "LendingLedger",
    "SimulatedClock",
    "utc_now",
    "Loan",
    "CheckoutResult",
    "ReturnResult",
    "CheckoutError",
    "CheckoutRequest",
    "ReturnRequest",
    "ReturnError",
    "LoanStatus",
    "LendingStats",
    "calculate_fee",
    "days_late",
    "format_amount",
]
