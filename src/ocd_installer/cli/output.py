"""
Output formatting utilities for the CLI.

Only used outside the full-screen UI: before it starts or after it exits.
"""

from rich.console import Console

# Global console instances
console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message."""
    error_console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")
