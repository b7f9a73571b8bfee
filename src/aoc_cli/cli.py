#!/usr/bin/env python3
"""
advent-of-code - Advent of Code puzzle CLI

This module is the thin orchestrator that builds the command tree from:
- commands/puzzle.py: Resolve puzzle selectors
- commands/input.py: Locate local puzzle input files

and hands it to the dispatcher, which owns the exit-code contract.
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_installed_version

import typer

from .cli_common import console, handle_errors, state
from .commands.input import build_input_command
from .commands.puzzle import build_puzzle_command
from .core.command import Command
from .dispatch import run
from .ui import create_info_panel

PROG_NAME = "advent-of-code"


# ─────────────────────────────────────────────────────────────────────────────
# Global Callback (--debug, --version)
# ─────────────────────────────────────────────────────────────────────────────


@handle_errors
def main_callback(
    debug: bool = typer.Option(
        False,
        "--debug",
        envvar="AOC_DEBUG",
        help="Show detailed error information for troubleshooting.",
        is_eager=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        is_eager=True,
    ),
) -> None:
    """
    [bold cyan]advent-of-code[/bold cyan] - Advent of Code puzzles

    Run without a command to do nothing and exit successfully.
    """
    state.debug = debug

    if version:
        try:
            pkg_version = get_installed_version(PROG_NAME)
        except PackageNotFoundError:
            pkg_version = "unknown"
        console.print(create_info_panel(PROG_NAME, f"v{pkg_version}"))
        raise typer.Exit()


# ─────────────────────────────────────────────────────────────────────────────
# Command Tree
# ─────────────────────────────────────────────────────────────────────────────


def build_root() -> Command:
    """Build the root command and register every subcommand under it."""
    root = Command(
        PROG_NAME,
        help="Advent of Code puzzle helper.",
        action=main_callback,
    )
    root.add(build_puzzle_command())
    root.add(build_input_command())
    return root


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def main() -> None:
    """Entry point for the CLI."""
    run(build_root())


if __name__ == "__main__":
    main()
