"""Notification delivery for circulation events.

Provides:
- NotificationPort, the capability the lending core calls into
- Console channels simulating e-mail and SMS delivery
- A webhook channel posting events as JSON
- An in-memory channel for embedding and tests
"""

from .base import MemoryChannel, NotificationChannel, NotificationError, SentMessage
from .console import ConsoleEmailChannel, ConsoleSmsChannel
from .port import NotificationPort
from .webhook import WebhookChannel

__all__ = [
    "NotificationPort",
    "NotificationChannel",
    "NotificationError",
    "SentMessage",
    "MemoryChannel",
    "ConsoleEmailChannel",
    "ConsoleSmsChannel",
    "WebhookChannel",
]
