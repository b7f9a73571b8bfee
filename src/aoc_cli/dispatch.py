"""
Command dispatcher.

Render a Command tree into a Typer application and run it against an
argument vector. Every outcome is folded into the two-code exit contract:
0 when the command resolved and completed, 1 for anything else.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from functools import wraps
from typing import Any

import click
import typer

from .cli_common import debug, err_console, render_unexpected, state
from .core.command import Command
from .core.errors import AOCError
from .core.exit_codes import EXIT_FAILURE, EXIT_SUCCESS, normalize_exit_code
from .ui import render_error

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


# Typer renders callback docstrings as help text, keep this one bare
def _noop() -> None:
    pass


def _discard_result(action: Callable[..., Any]) -> Callable[..., None]:
    """Drop the action's return value so click only ever returns Exit codes."""

    @wraps(action)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        action(*args, **kwargs)

    return wrapper


# ─────────────────────────────────────────────────────────────────────────────
# Tree → Typer
# ─────────────────────────────────────────────────────────────────────────────


def build_app(command: Command) -> typer.Typer:
    """Build a Typer application for a group command and its subtree."""
    app = typer.Typer(
        name=command.name,
        help=command.help,
        short_help=command.short_help,
        no_args_is_help=False,
        rich_markup_mode="rich",
        add_completion=False,
        context_settings=CONTEXT_SETTINGS,
    )

    # A callback forces Typer to keep a group even with zero or one children
    app.callback(invoke_without_command=True)(_discard_result(command.action or _noop))

    for child in command.children:
        if child.is_group:
            app.add_typer(build_app(child), name=child.name)
        else:
            app.command(
                name=child.name,
                help=child.help,
                short_help=child.short_help,
            )(_discard_result(child.action or _noop))

    return app


# ─────────────────────────────────────────────────────────────────────────────
# Dispatch
# ─────────────────────────────────────────────────────────────────────────────


def dispatch(root: Command, argv: Sequence[str] | None = None) -> int:
    """Run the command tree against argv and return the process exit code.

    Args:
        root: Root of the command tree; its name is used as the program name.
        argv: Arguments excluding the program name. Defaults to sys.argv[1:].

    Returns:
        EXIT_SUCCESS or EXIT_FAILURE.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    command = typer.main.get_command(build_app(root))
    state.debug = False

    try:
        result = command.main(args=args, prog_name=root.name, standalone_mode=False)
    except click.ClickException as e:
        # Unknown subcommand, bad option or missing argument
        e.show()
        return EXIT_FAILURE
    except click.exceptions.Abort:
        err_console.print("\n[dim]Operation cancelled.[/dim]")
        return EXIT_FAILURE
    except AOCError as e:
        render_error(err_console, e, debug=state.debug)
        return EXIT_FAILURE
    except Exception as e:
        render_unexpected(e)
        return EXIT_FAILURE

    # Actions return None, so an int here is an Exit code
    code = EXIT_SUCCESS
    if isinstance(result, int) and not isinstance(result, bool):
        code = normalize_exit_code(result)
    debug(f"{root.name} {' '.join(args)} -> exit {code}")
    return code


def run(root: Command) -> None:
    """Dispatch process arguments and terminate with the resulting exit code."""
    code = dispatch(root)
    if code != EXIT_SUCCESS:
        raise SystemExit(code)
