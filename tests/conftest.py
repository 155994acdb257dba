"""Pytest configuration and shared fixtures.

This module provides fixtures for testing the circulation desk,
including a controllable clock, in-memory notification channels and a
stocked catalog and membership.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from circulation.catalog import Catalog
from circulation.config import reset_config
from circulation.lending import LendingLedger, SimulatedClock
from circulation.membership import Membership
from circulation.notifications import (
    MemoryChannel,
    NotificationChannel,
    NotificationError,
    NotificationPort,
)

CLEAN_CODE = "978-0132350884"
DESIGN_PATTERNS = "978-0201633610"
FEE_PER_DAY = Decimal("1.00")


class FailingChannel(NotificationChannel):
    """Channel that always fails to deliver."""

    name = "failing"

    def __init__(self):
        self.attempts = 0

    def send(self, recipient: str, subject: str, message: str) -> None:
        self.attempts += 1
        raise NotificationError("delivery failed")


# ============================================================================
# Infrastructure Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep every test independent of the developer's environment."""
    for name in (
        "CIRCULATION_FEE_PER_DAY",
        "CIRCULATION_DEFAULT_LOAN_DAYS",
        "CIRCULATION_CURRENCY",
        "CIRCULATION_WEBHOOK_URL",
        "CIRCULATION_WEBHOOK_TIMEOUT",
        "CIRCULATION_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def clock() -> SimulatedClock:
    """Clock frozen at 2025-01-01 10:00 UTC."""
    return SimulatedClock(datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def email() -> MemoryChannel:
    """Primary (e-mail-like) channel recording messages."""
    return MemoryChannel(name="email")


@pytest.fixture
def sms() -> MemoryChannel:
    """Secondary (SMS-like) channel recording messages."""
    return MemoryChannel(name="sms")


@pytest.fixture
def failing_channel() -> FailingChannel:
    """Channel whose every delivery fails."""
    return FailingChannel()


@pytest.fixture
def notifier(email, sms) -> NotificationPort:
    """Notification port over the in-memory channels."""
    return NotificationPort(primary=email, secondary=sms, currency="R$")


# ============================================================================
# Domain Fixtures
# ============================================================================


@pytest.fixture
def catalog() -> Catalog:
    """Catalog with two books."""
    catalog = Catalog()
    catalog.add_book("Clean Code", "Robert C. Martin", CLEAN_CODE)
    catalog.add_book("Design Patterns", "Erich Gamma", DESIGN_PATTERNS)
    return catalog


@pytest.fixture
def membership(notifier) -> Membership:
    """Membership desk with two members."""
    membership = Membership(notifier)
    membership.register("João Silva", 1)
    membership.register("Maria Oliveira", 2)
    return membership


@pytest.fixture
def ledger(catalog, membership, notifier, clock, email, sms) -> LendingLedger:
    """Lending ledger over the stocked catalog and membership.

    Welcome messages from the membership fixture are cleared so tests
    only see what the ledger sends.
    """
    email.clear()
    sms.clear()
    return LendingLedger(
        catalog,
        membership,
        notifier,
        fee_per_day=FEE_PER_DAY,
        clock=clock,
    )
