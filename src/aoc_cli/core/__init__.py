"""Core domain: command tree, puzzle selectors and input lookup.

Nothing in this package may import the CLI surface (cli*, commands/, ui/).
"""

from __future__ import annotations
