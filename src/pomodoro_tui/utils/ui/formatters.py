"""Output formatters for messages printed outside the timer screen."""

from .console import get_console


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")
