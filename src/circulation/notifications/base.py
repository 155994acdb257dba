"""Base notification channel functionality."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class NotificationError(Exception):
    """Raised when a channel fails to deliver a message."""

    pass


@dataclass(frozen=True)
class SentMessage:
    """A message handed to a channel."""

    channel: str
    recipient: str
    subject: str
    message: str


class NotificationChannel(ABC):
    """Abstract delivery channel (e-mail-like, SMS-like, ...)."""

    name: str = "channel"

    @abstractmethod
    def send(self, recipient: str, subject: str, message: str) -> None:
        """Deliver a message.

        Args:
            recipient: Member name the message is addressed to
            subject: Short subject line (may be ignored by the channel)
            message: Message body

        Raises:
            NotificationError: If delivery fails
        """
        pass


@dataclass
class MemoryChannel(NotificationChannel):
    """Channel that keeps every message in memory."""

    name: str = "memory"
    sent: list[SentMessage] = field(default_factory=list)

    def send(self, recipient: str, subject: str, message: str) -> None:
        self.sent.append(SentMessage(self.name, recipient, subject, message))

    def clear(self) -> None:
        """Forget all recorded messages."""
        self.sent.clear()
