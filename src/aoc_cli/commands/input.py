"""
Provide the input command.

Locate the input file for a puzzle below the local input directory and
print its path, or its contents with --show.
"""

from pathlib import Path

import typer

from .. import config
from ..bootstrap import get_default_adapters
from ..cli_common import debug, handle_errors
from ..core.command import Command
from ..core.inputs import candidate_paths, read_input, resolve_input
from ..core.puzzle import SELECTOR_HELP, select_puzzle


@handle_errors
def input_cmd(
    selector: str | None = typer.Argument(
        None,
        metavar="PUZZLE",
        help=SELECTOR_HELP,
        show_default=False,
    ),
    input_dir: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        envvar=config.INPUT_DIR_ENV,
        help="Directory holding <year>/<day>[.<phase>].txt input files.",
        show_default=False,
    ),
    show: bool = typer.Option(
        False,
        "--show",
        help="Print the input contents instead of its path.",
    ),
) -> None:
    """Locate the input file for a puzzle.

    For 2022.05.2 the files tried are 2022/05.2.txt, 2022/05.1.txt and
    2022/05.txt, in that order.
    """
    today = get_default_adapters().clock.today()
    puzzle = select_puzzle(selector, today)
    root = config.get_input_dir(input_dir)

    for path in candidate_paths(puzzle, root):
        debug(f"candidate {path}")

    if show:
        typer.echo(read_input(puzzle, root), nl=False)
        return

    typer.echo(str(resolve_input(puzzle, root)))


def build_input_command() -> Command:
    return Command(
        "input",
        help="Locate the input file for a puzzle.",
        action=input_cmd,
    )
