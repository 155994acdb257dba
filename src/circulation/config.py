"""Configuration management for the circulation desk.

Loads configuration from environment variables and provides defaults.
"""

import logging
import math
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

Number = TypeVar("Number", int, float)


def _env_number(name: str, default: str, parse: Callable[[str], Number]) -> Number:
    """Read a numeric environment variable, naming it in the error."""
    value = os.environ.get(name, default)
    try:
        return parse(value)
    except ValueError:
        raise ValueError(f"Invalid {name}: {value!r}")


@dataclass
class Config:
    """Application configuration."""

    # Fees
    fee_per_day: Decimal
    currency: str

    # Loans
    default_loan_days: int

    # Webhook notifications
    webhook_url: Optional[str]
    webhook_timeout: float  # seconds

    # Logging
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If a numeric setting cannot be parsed
        """
        fee_str = os.environ.get("CIRCULATION_FEE_PER_DAY", "1.00")
        try:
            fee_per_day = Decimal(fee_str)
        except InvalidOperation:
            raise ValueError(f"Invalid CIRCULATION_FEE_PER_DAY: {fee_str!r}")
        if not fee_per_day.is_finite():
            raise ValueError(f"Invalid CIRCULATION_FEE_PER_DAY: {fee_str!r}")

        return cls(
            fee_per_day=fee_per_day,
            currency=os.environ.get("CIRCULATION_CURRENCY", "R$"),
            default_loan_days=_env_number("CIRCULATION_DEFAULT_LOAN_DAYS", "7", int),
            webhook_url=os.environ.get("CIRCULATION_WEBHOOK_URL") or None,
            webhook_timeout=_env_number("CIRCULATION_WEBHOOK_TIMEOUT", "5.0", float),
            log_level=os.environ.get("CIRCULATION_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not self.fee_per_day.is_finite():
            errors.append(f"Fee per day must be a finite amount: {self.fee_per_day}")
        elif self.fee_per_day < 0:
            errors.append(f"Fee per day cannot be negative: {self.fee_per_day}")

        if self.default_loan_days <= 0:
            errors.append(
                f"Default loan duration must be positive: {self.default_loan_days}"
            )

        if not math.isfinite(self.webhook_timeout) or self.webhook_timeout <= 0:
            errors.append(f"Webhook timeout must be positive: {self.webhook_timeout}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def has_webhook_config(self) -> bool:
        """Check if a webhook endpoint is configured."""
        return bool(self.webhook_url)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
