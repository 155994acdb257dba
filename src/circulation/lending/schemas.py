"""Pydantic schemas and enums for lending."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class LoanStatus(str, Enum):
    """Status of a loan."""

    OPEN = "open"  # Book is out with the member
    CLOSED = "closed"  # Book has been returned


class CheckoutError(str, Enum):
    """Why a checkout was refused."""

    BOOK_UNAVAILABLE = "book_unavailable"
    MEMBER_NOT_FOUND = "member_not_found"


class ReturnError(str, Enum):
    """Why a return was refused."""

    NO_OPEN_LOAN = "no_open_loan"


class CheckoutRequest(BaseModel):
    """Schema for a checkout request."""

    member_id: int
    book_identifier: str = Field(..., min_length=1)
    duration_days: int = Field(..., gt=0)

    model_config = {"str_strip_whitespace": True}


class ReturnRequest(BaseModel):
    """Schema for a return request."""

    book_identifier: str = Field(..., min_length=1)
    member_id: int

    model_config = {"str_strip_whitespace": True}


class LendingStats(BaseModel):
    """Overall lending statistics."""

    total_loans: int
    open_loans: int
    closed_loans: int
    overdue_loans: int
    fees_charged: Decimal
