"""Composition root wiring advent-of-code adapters."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from aoc_cli.adapters.system_clock import SystemClock
from aoc_cli.ports.clock import Clock


@dataclass(frozen=True)
class DefaultAdapters:
    """Container for default adapter instances."""

    clock: Clock


@lru_cache(maxsize=1)
def get_default_adapters() -> DefaultAdapters:
    """Return the default adapter wiring."""

    return DefaultAdapters(clock=SystemClock())
