"""UI messages and status indicators."""

from __future__ import annotations

from mcmcpairs.ui.console import REPO_URL, VERSION, console, icon
from mcmcpairs.ui.logging import log

__all__ = [
    "action",
    "error",
    "info",
    "print_next_steps",
    "show_version",
    "success",
    "warning",
]


def success(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a success message."""
    spaces = "  " * indent
    console.print(f"{spaces}[success]{icon('check')}[/success] {message}")
    if do_log:
        log(message)


def warning(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a warning message."""
    spaces = "  " * indent
    console.print(f"{spaces}[warning]{icon('warn')}[/warning]  {message}")
    if do_log:
        log(message, level="warning")


def error(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an error message."""
    spaces = "  " * indent
    console.print(f"{spaces}[error]{icon('error')}[/error] {message}")
    if do_log:
        log(message, level="error")


def info(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an info message."""
    spaces = "  " * indent
    console.print(f"{spaces}[dim]{icon('info')}[/dim] {message}")
    if do_log:
        log(message)


def action(message: str) -> None:
    """Display an action/process message."""
    console.print(f"[bold yellow]{icon('bullet')}[/bold yellow] {message}")
    log(message)


def print_next_steps(steps: list[str]) -> None:
    """Print suggested next steps for the user."""
    console.print("\n[header]Next steps:[/header]")
    for number, step in enumerate(steps, start=1):
        console.print(f"  {number}. {step}")


def show_version() -> None:
    """Show version information (for --version flag)."""
    console.print(f"[header]mcmcpairs[/header] [dim]v{VERSION}[/dim]")
    console.print(f"[dim]{REPO_URL}[/dim]")
