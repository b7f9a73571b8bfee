"""
Error types for the advent-of-code CLI.

Every domain failure derives from AOCError so the CLI error boundary can
render it consistently. All of them map to exit code 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .exit_codes import EXIT_FAILURE


@dataclass(eq=False)
class AOCError(Exception):
    """Base error with a user-facing message and an optional hint."""

    user_message: str
    suggested_action: str | None = None
    debug_context: str | None = None
    exit_code: int = field(default=EXIT_FAILURE)

    def __post_init__(self) -> None:
        super().__init__(self.user_message)

    def __str__(self) -> str:
        return self.user_message


@dataclass(eq=False)
class CommandTreeError(AOCError):
    """The command tree was wired incorrectly."""


@dataclass(eq=False)
class DuplicateCommandError(CommandTreeError):
    """Two sibling commands share a name."""

    name: str = ""


@dataclass(eq=False)
class CommandNotFoundError(AOCError):
    """A command path does not exist in the tree."""

    path: tuple[str, ...] = ()


@dataclass(eq=False)
class PuzzleSelectorError(AOCError):
    """A puzzle selector could not be parsed or names an impossible puzzle."""

    selector: str = ""


@dataclass(eq=False)
class InputNotFoundError(AOCError):
    """No input file exists for the requested puzzle."""

    searched: tuple[str, ...] = ()
