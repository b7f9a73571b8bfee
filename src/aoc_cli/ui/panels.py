"""Rich panels for errors, warnings and informational messages."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from ..core.errors import AOCError


def create_error_panel(title: str, message: str, hint: str | None = None) -> Panel:
    body = Text(message, style="bold")
    if hint:
        body.append(f"\n\n{hint}", style="dim")
    return Panel(body, title=f"[bold red]{title}[/bold red]", border_style="red", expand=False)


def create_warning_panel(title: str, message: str, hint: str | None = None) -> Panel:
    body = Text(message)
    if hint:
        body.append(f"\n\n{hint}", style="dim")
    return Panel(
        body, title=f"[bold yellow]{title}[/bold yellow]", border_style="yellow", expand=False
    )


def create_info_panel(title: str, message: str) -> Panel:
    return Panel(Text(message), title=f"[bold cyan]{title}[/bold cyan]", border_style="cyan", expand=False)


def render_error(console: Console, error: AOCError, debug: bool = False) -> None:
    """Render an AOCError, including its debug context when requested."""
    panel = create_error_panel("Error", error.user_message, error.suggested_action)
    if debug and error.debug_context:
        console.print(Group(panel, Text(error.debug_context, style="dim")))
    else:
        console.print(panel)
