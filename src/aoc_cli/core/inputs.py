"""Locate puzzle input files on the local filesystem."""

from __future__ import annotations

from pathlib import Path

from .errors import InputNotFoundError
from .puzzle import Puzzle


def candidate_paths(puzzle: Puzzle, root: Path) -> list[Path]:
    """Return the input files to try for a puzzle, most specific first.

    A phase may reuse the previous phase's input, and both phases may share
    the day's input:

      <root>/2022/05.2.txt
      <root>/2022/05.1.txt
      <root>/2022/05.txt
    """
    year_dir = root / str(puzzle.year)
    day = f"{puzzle.day:02d}"

    paths = [year_dir / f"{day}.{puzzle.phase}.txt"]
    if puzzle.phase > 1:
        paths.append(year_dir / f"{day}.{puzzle.phase - 1}.txt")
    paths.append(year_dir / f"{day}.txt")
    return paths


def resolve_input(puzzle: Puzzle, root: Path) -> Path:
    """Return the first existing input file for the puzzle.

    Raises:
        InputNotFoundError: None of the candidate files exist.
    """
    candidates = candidate_paths(puzzle, root)
    for path in candidates:
        if path.is_file():
            return path

    raise InputNotFoundError(
        user_message="input not found",
        suggested_action=f"Save the puzzle input as {candidates[-1]}",
        debug_context="\n".join(str(p) for p in candidates),
        searched=tuple(str(p) for p in candidates),
    )


def read_input(puzzle: Puzzle, root: Path) -> str:
    """Read the resolved input file as text."""
    path = resolve_input(puzzle, root)
    with open(path, encoding="utf-8") as f:
        return f.read()
