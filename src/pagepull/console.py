"""Colored status messages for the command line."""

from typing import Optional

from rich.console import Console
from rich.markup import escape


def _stdout(console: Optional[Console]) -> Console:
    return console or Console()


def _stderr(console: Optional[Console]) -> Console:
    return console or Console(stderr=True)


def success(message: str, console: Optional[Console] = None) -> None:
    """Print a success message."""
    _stdout(console).print(f"[green]✓[/green] {escape(message)}")


def error(message: str, console: Optional[Console] = None) -> None:
    """Print an error message to stderr."""
    _stderr(console).print(f"[red]✗[/red] {escape(message)}")


def info(message: str, console: Optional[Console] = None) -> None:
    """Print an informational message."""
    _stdout(console).print(f"[blue]ℹ[/blue] {escape(message)}")


def warn(message: str, console: Optional[Console] = None) -> None:
    """Print a warning message."""
    _stdout(console).print(f"[yellow]⚠[/yellow] {escape(message)}")
