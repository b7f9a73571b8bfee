"""
Provide the puzzle command.

Resolve a puzzle selector against today's date and print the result.
"""

import json

import typer

from ..bootstrap import get_default_adapters
from ..cli_common import console, debug, handle_errors
from ..core.command import Command
from ..core.puzzle import SELECTOR_HELP, select_puzzle


@handle_errors
def puzzle_cmd(
    selector: str | None = typer.Argument(
        None,
        metavar="PUZZLE",
        help=SELECTOR_HELP,
        show_default=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output the puzzle as JSON.",
    ),
) -> None:
    """Show which puzzle a selector resolves to.

    Without a selector, show the most recent puzzle: today's during
    December, day 25 of the previous event otherwise.
    """
    today = get_default_adapters().clock.today()
    debug(f"resolving puzzle {selector!r} relative to {today.isoformat()}")
    puzzle = select_puzzle(selector, today)

    if json_output:
        typer.echo(json.dumps(puzzle.to_dict()))
        return

    console.print(
        f"[bold cyan]{puzzle.year}[/bold cyan] "
        f"day [bold]{puzzle.day}[/bold] "
        f"phase [bold]{puzzle.phase}[/bold]",
        highlight=False,
    )


def build_puzzle_command() -> Command:
    return Command(
        "puzzle",
        help="Show which puzzle a selector resolves to.",
        action=puzzle_cmd,
    )
