"""Shared console helpers for Appwrite Starter.

Provides the Rich console used by the CLI, coloured status messages, a
key/value summary table, and the choice normalisation applied to answers
collected from the user.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Answer normalisation
# ---------------------------------------------------------------------------


def normalize_choice(value: str) -> str:
    """Normalise a menu choice to the identifier used on disk.

    Examples::

        normalize_choice("Vue.JS") -> "vuejs"
        normalize_choice("Batteries-included") -> "batteriesincluded"
        normalize_choice("Account") -> "account"
    """
    return value.strip().lower().replace(".", "").replace("-", "")


def parse_services(raw: str | list[str] | None) -> list[str]:
    """Split a comma-separated services answer into normalised names.

    Empty entries are dropped and duplicates removed while keeping the order
    in which the user listed them.
    """
    if raw is None:
        return []
    items = raw.split(",") if isinstance(raw, str) else raw

    services: list[str] = []
    for item in items:
        name = normalize_choice(item)
        if name and name not in services:
            services.append(name)
    return services


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_command(command: str) -> None:
    """Print a shell command the user is expected to run next."""
    console.print(f"  [cyan]{command}[/cyan]")
