"""
CLI Common Utilities.

Shared console, global state and the error boundary decorator used by every
command module. Extracted to prevent circular imports.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

import typer
from rich.console import Console

from . import ui
from .core.errors import AOCError
from .core.exit_codes import EXIT_FAILURE

F = TypeVar("F", bound=Callable[..., Any])

# ─────────────────────────────────────────────────────────────────────────────
# Shared Console and State
# ─────────────────────────────────────────────────────────────────────────────

console = Console()
err_console = Console(stderr=True)


class AppState:
    """Global application state for CLI flags."""

    debug: bool = False


state = AppState()


def debug(message: str) -> None:
    """Print a trace line to stderr when --debug is active."""
    if state.debug:
        err_console.print(f"[dim]debug: {message}[/dim]", highlight=False, soft_wrap=True)


# ─────────────────────────────────────────────────────────────────────────────
# Error Boundary Decorator
# ─────────────────────────────────────────────────────────────────────────────


def render_unexpected(error: BaseException) -> None:
    if state.debug:
        err_console.print_exception()
    else:
        err_console.print(
            ui.create_warning_panel(
                "Unexpected Error",
                str(error) or type(error).__name__,
                "Run with --debug for full traceback",
            )
        )


def handle_errors(func: F) -> F:
    """Decorator to catch AOCError and render beautifully."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except AOCError as e:
            ui.render_error(err_console, e, debug=state.debug)
            raise typer.Exit(e.exit_code)
        except KeyboardInterrupt:
            err_console.print("\n[dim]Operation cancelled.[/dim]")
            raise typer.Exit(EXIT_FAILURE)
        except (typer.Exit, SystemExit):
            # Let typer exits pass through
            raise
        except Exception as e:
            render_unexpected(e)
            raise typer.Exit(EXIT_FAILURE)

    return cast(F, wrapper)
