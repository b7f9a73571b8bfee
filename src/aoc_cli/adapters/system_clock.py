"""System clock adapter for Clock port."""

from __future__ import annotations

import datetime

from aoc_cli.ports.clock import Clock


class SystemClock(Clock):
    """Clock adapter backed by the local system time."""

    def today(self) -> datetime.date:
        return datetime.date.today()
