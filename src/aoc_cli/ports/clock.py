"""Clock port definition."""

from __future__ import annotations

import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current local date."""

    def today(self) -> datetime.date:
        """Return today's date in local time."""
