"""Test fakes for advent-of-code ports."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from aoc_cli.bootstrap import DefaultAdapters


@dataclass
class FakeClock:
    """Clock frozen on a fixed date."""

    fixed: datetime.date

    def today(self) -> datetime.date:
        return self.fixed


def build_fake_adapters(today: datetime.date) -> DefaultAdapters:
    """Return default adapters wired with a frozen clock."""
    return DefaultAdapters(clock=FakeClock(today))
