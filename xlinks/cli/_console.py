"""Shared Rich console instances and helpers."""

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def status_icon(ok: bool) -> str:
    """Return a colored checkmark or cross for status output."""
    if ok:
        return "[green]✓[/green]"
    return "[red]✗[/red]"
