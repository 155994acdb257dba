"""Webhook notification channel.

Posts each message as a JSON document to a configured HTTP endpoint:

    {"channel": "webhook", "recipient": "...", "subject": "...", "message": "..."}
"""

import logging

import requests

from .base import NotificationChannel, NotificationError

logger = logging.getLogger(__name__)


class WebhookChannel(NotificationChannel):
    """Delivers notifications to an HTTP endpoint."""

    name = "webhook"

    def __init__(self, url: str, timeout: float = 5.0):
        """Initialize channel.

        Args:
            url: Endpoint receiving POST requests
            timeout: Request timeout in seconds
        """
        self.url = url
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({"User-Agent": "Circulation/0.1"})

    def send(self, recipient: str, subject: str, message: str) -> None:
        payload = {
            "channel": self.name,
            "recipient": recipient,
            "subject": subject,
            "message": message,
        }
        try:
            response = self._session.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise NotificationError("Webhook request timed out")
        except requests.exceptions.HTTPError as e:
            raise NotificationError(f"Webhook HTTP error: {e.response.status_code}")
        except requests.exceptions.RequestException as e:
            raise NotificationError(f"Webhook request failed: {e}")

        logger.debug("Webhook delivered | recipient=%s subject=%s", recipient, subject)
