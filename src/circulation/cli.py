"""Command-line interface for the circulation desk.

Built with Typer for commands and Rich for beautiful output.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .catalog import Catalog
from .config import Config, get_config
from .lending import LendingLedger, Loan, SimulatedClock, format_amount
from .log import configure_logging
from .membership import Membership
from .notifications import (
    ConsoleEmailChannel,
    ConsoleSmsChannel,
    NotificationChannel,
    NotificationPort,
    WebhookChannel,
)

# Create the main app
app = typer.Typer(
    name="circulation",
    help="Library circulation desk: books, members, loans and late fees.",
    no_args_is_help=True,
)

# Rich console for pretty output
console = Console()


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def load_config() -> Config:
    """Load configuration, exiting with an error message if it cannot be parsed."""
    try:
        return get_config()
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)


def build_notifier(config: Config) -> NotificationPort:
    """Wire notification channels from configuration.

    The webhook replaces console e-mail as primary channel when configured;
    SMS confirmations always go to the console.
    """
    primary: NotificationChannel
    if config.has_webhook_config():
        primary = WebhookChannel(config.webhook_url, timeout=config.webhook_timeout)
    else:
        primary = ConsoleEmailChannel(console)

    return NotificationPort(
        primary=primary,
        secondary=ConsoleSmsChannel(console),
        currency=config.currency,
    )


def format_loan_table(
    loans: tuple[Loan, ...],
    catalog: Catalog,
    membership: Membership,
    title: str = "Loans",
) -> Table:
    """Create a rich table for displaying loans."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Book", style="cyan", max_width=40)
    table.add_column("Member", style="green", max_width=25)
    table.add_column("Checked out")
    table.add_column("Due")
    table.add_column("Returned")
    table.add_column("Status", style="yellow")

    for loan in loans:
        book = catalog.get_book(loan.book_identifier)
        member = membership.find_by_id(loan.member_id)
        table.add_row(
            book.title if book else loan.book_identifier,
            member.name if member else str(loan.member_id),
            loan.checkout_time.strftime("%Y-%m-%d"),
            loan.due_time.strftime("%Y-%m-%d"),
            loan.return_time.strftime("%Y-%m-%d") if loan.return_time else "-",
            loan.status.value,
        )

    return table


# ============================================================================
# Demo Command
# ============================================================================


@app.command()
def demo(
    duration: Optional[int] = typer.Option(
        None, "--duration", "-d", min=1, help="Loan length in days (default: from config)"
    ),
    days_out: int = typer.Option(
        0, "--days-out", "-o", min=0, help="Days between checkout and return"
    ),
) -> None:
    """Run the circulation demo.

    Adds two books, registers two members, checks out "Clean Code" to the
    first member and returns it after --days-out days, then prints the fee.
    """
    config = load_config()
    errors = config.validate()
    if errors:
        for error in errors:
            print_error(error)
        raise typer.Exit(1)

    configure_logging(config.log_level)

    clock = SimulatedClock()
    notifier = build_notifier(config)
    catalog = Catalog()
    membership = Membership(notifier)
    ledger = LendingLedger(
        catalog, membership, notifier, fee_per_day=config.fee_per_day, clock=clock
    )

    catalog.add_book("Clean Code", "Robert C. Martin", "978-0132350884")
    catalog.add_book("Design Patterns", "Erich Gamma", "978-0201633610")

    membership.register("João Silva", 1)
    membership.register("Maria Oliveira", 2)

    loan_days = duration or config.default_loan_days
    checkout = ledger.checkout(1, "978-0132350884", loan_days)
    if not checkout.success:
        print_error(f"Checkout failed: {checkout.error.value}")
        raise typer.Exit(1)
    print_info(f"Checked out for {loan_days} days (loan {checkout.loan_id})")

    clock.advance(days=days_out)
    returned = ledger.return_book("978-0132350884", 1)
    if not returned.success:
        print_error(f"Return failed: {returned.error.value}")
        raise typer.Exit(1)

    console.print(
        f"\n[bold]Late fee:[/bold] {format_amount(returned.fee, config.currency)}",
        highlight=False,
    )
    console.print(format_loan_table(ledger.all_loans(), catalog, membership))


# ============================================================================
# Config Command
# ============================================================================


@app.command("config")
def show_config() -> None:
    """Show effective configuration."""
    config = load_config()

    table = Table(title="Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Fee per day", format_amount(config.fee_per_day, config.currency))
    table.add_row("Default loan days", str(config.default_loan_days))
    table.add_row("Webhook URL", config.webhook_url or "-")
    table.add_row("Webhook timeout", f"{config.webhook_timeout}s")
    table.add_row("Log level", config.log_level)
    console.print(table)

    errors = config.validate()
    if errors:
        for error in errors:
            print_error(error)
        raise typer.Exit(1)
    print_success("Configuration is valid")


# ============================================================================
# Version Command
# ============================================================================


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"circulation version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
