"""Money helpers shared by fee calculation and notifications."""

from decimal import Decimal

CENTS = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    """Round an amount to cents."""
    return Decimal(amount).quantize(CENTS)


def format_amount(amount: Decimal, currency: str = "R$") -> str:
    """Format an amount for display, e.g. ``R$ 3.00``."""
    return f"{currency} {Decimal(amount):.2f}"
