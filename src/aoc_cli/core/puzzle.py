"""
Puzzle selectors.

A puzzle is named by year, day and phase. On the command line it is written
as one of (first match wins):

  YYYY.DD.P   2022.05.2
  YYYY.DD     2022.05      phase defaults to 1
  DD.P        5.2          year defaults to the current event
  DD          5            year and phase default

The current event is derived from the date: during December it is today's
puzzle, the rest of the year it is the last day of the previous event.
"""

from __future__ import annotations

import datetime
import re
from dataclasses import asdict, dataclass

from .errors import PuzzleSelectorError

FIRST_YEAR = 2015
LAST_DAY = 25
LAST_PHASE = 2

SELECTOR_PATTERNS = (
    re.compile(r"^(?P<year>\d{4})\.(?P<day>\d{1,2})\.(?P<phase>\d)$", re.ASCII),
    re.compile(r"^(?P<year>\d{4})\.(?P<day>\d{1,2})$", re.ASCII),
    re.compile(r"^(?P<day>\d{1,2})\.(?P<phase>\d)$", re.ASCII),
    re.compile(r"^(?P<day>\d{1,2})$", re.ASCII),
)

SELECTOR_FORMS = "YYYY.DD.P | YYYY.DD | DD.P | DD"
SELECTOR_HELP = f"Which puzzle? ({SELECTOR_FORMS})"


@dataclass(frozen=True, order=True)
class Puzzle:
    """A single puzzle phase."""

    year: int
    day: int
    phase: int = 1

    @classmethod
    def current(cls, today: datetime.date) -> Puzzle:
        """Return the most recent puzzle released on or before today."""
        if today.month == 12:
            return cls(today.year, min(today.day, LAST_DAY), 1)
        return cls(today.year - 1, LAST_DAY, 1)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.year}.{self.day:02d}.{self.phase}"


def _fail(selector: str, message: str) -> PuzzleSelectorError:
    return PuzzleSelectorError(
        user_message=message,
        suggested_action=f"Use one of: {SELECTOR_FORMS}",
        selector=selector,
    )


def _match(selector: str) -> dict[str, str]:
    for pattern in SELECTOR_PATTERNS:
        match = pattern.match(selector)
        if match:
            return {k: v for k, v in match.groupdict().items() if v is not None}
    raise _fail(selector, "invalid pattern")


def parse_puzzle(selector: str, today: datetime.date) -> Puzzle:
    """Parse a puzzle selector relative to today's date.

    Args:
        selector: Selector text such as "2022.05.2" or "5".
        today: Date used to fill in missing parts and reject future puzzles.

    Returns:
        The validated puzzle.

    Raises:
        PuzzleSelectorError: The selector is malformed or out of range.
    """
    parts = _match(selector.strip())
    current = Puzzle.current(today)

    year = current.year
    if "year" in parts:
        year = int(parts["year"])
        if year < FIRST_YEAR:
            raise _fail(selector, f"year starts at {FIRST_YEAR}")
        if year > current.year:
            raise _fail(selector, "future puzzles are unknown")

    day = current.day
    if "day" in parts:
        day = int(parts["day"])
        if day == 0:
            raise _fail(selector, "day starts at 1")
        if day > LAST_DAY:
            raise _fail(selector, f"day stops at {LAST_DAY}")
        if year >= current.year and day > current.day:
            raise _fail(selector, "future puzzles are unknown")

    phase = current.phase
    if "phase" in parts:
        phase = int(parts["phase"])
        if phase == 0:
            raise _fail(selector, "phase starts at 1")
        if phase > LAST_PHASE:
            raise _fail(selector, f"phase stops at {LAST_PHASE}")

    return Puzzle(year, day, phase)


def select_puzzle(selector: str | None, today: datetime.date) -> Puzzle:
    """Parse the selector, or fall back to the current puzzle when omitted."""
    if selector is None:
        return Puzzle.current(today)
    return parse_puzzle(selector, today)
