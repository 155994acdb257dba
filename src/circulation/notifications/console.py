"""Console channels that simulate e-mail and SMS delivery."""

from typing import Optional

from rich.console import Console

from .base import NotificationChannel


class ConsoleEmailChannel(NotificationChannel):
    """Prints a line for every e-mail that would be sent."""

    name = "email"

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def send(self, recipient: str, subject: str, message: str) -> None:
        self.console.print(
            f"[cyan]E-mail sent to[/cyan] {recipient}. [dim]Subject:[/dim] {subject}",
            highlight=False,
        )


class ConsoleSmsChannel(NotificationChannel):
    """Prints a line for every SMS that would be sent."""

    name = "sms"

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def send(self, recipient: str, subject: str, message: str) -> None:
        # SMS has no subject line
        self.console.print(
            f"[magenta]SMS sent to[/magenta] {recipient}: {message}",
            highlight=False,
        )
