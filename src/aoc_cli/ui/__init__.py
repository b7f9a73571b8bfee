"""Terminal rendering helpers."""

from __future__ import annotations

from .panels import (
    create_error_panel,
    create_info_panel,
    create_warning_panel,
    render_error,
)

__all__ = [
    "create_error_panel",
    "create_info_panel",
    "create_warning_panel",
    "render_error",
]
