"""Notification port used by the membership desk and the lending ledger.

Delivery is best-effort: a channel failure is logged and swallowed so that
it can never undo a registration, checkout or return that already happened.
"""

import logging
from decimal import Decimal
from typing import Optional

from ..money import format_amount
from .base import NotificationChannel

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome to the Library"
WELCOME_MESSAGE = "You have been registered in our system!"
CHECKOUT_SUBJECT = "Loan Confirmed"
LATE_FEE_SUBJECT = "Late Return Fee"


class NotificationPort:
    """Sends circulation notifications through a primary and an optional secondary channel."""

    def __init__(
        self,
        primary: NotificationChannel,
        secondary: Optional[NotificationChannel] = None,
        currency: str = "R$",
    ):
        """Initialize notification port.

        Args:
            primary: Channel for every notification (e-mail-like)
            secondary: Extra channel for checkout confirmations (SMS-like)
            currency: Currency symbol used when formatting fees
        """
        self.primary = primary
        self.secondary = secondary
        self.currency = currency

    def notify_welcome(self, member_name: str) -> None:
        """Greet a newly registered member."""
        self._dispatch(self.primary, member_name, WELCOME_SUBJECT, WELCOME_MESSAGE)

    def notify_checkout(self, member_name: str, book_title: str) -> None:
        """Confirm a checkout on both channels."""
        self._dispatch(
            self.primary,
            member_name,
            CHECKOUT_SUBJECT,
            f"You borrowed the book: {book_title}",
        )
        if self.secondary is not None:
            self._dispatch(
                self.secondary,
                member_name,
                CHECKOUT_SUBJECT,
                f"Loan of book: {book_title}",
            )

    def notify_late_fee(self, member_name: str, amount: Decimal) -> None:
        """Tell a member about the fee owed for a late return."""
        self._dispatch(
            self.primary,
            member_name,
            LATE_FEE_SUBJECT,
            f"You have a late fee of {format_amount(amount, self.currency)}",
        )

    def _dispatch(
        self,
        channel: NotificationChannel,
        recipient: str,
        subject: str,
        message: str,
    ) -> None:
        try:
            channel.send(recipient, subject, message)
        except Exception as e:
            logger.warning(
                "Notification failed | channel=%s recipient=%s subject=%s error=%s",
                channel.name,
                recipient,
                subject,
                e,
            )
