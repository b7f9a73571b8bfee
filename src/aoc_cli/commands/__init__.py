"""CLI command modules.

Each module exports the action functions and the Command descriptor that
cli.py attaches to the root of the command tree.
"""

from __future__ import annotations
