"""
Configuration management.

User settings live in ~/.config/advent-of-code/config.json and are merged
over DEFAULT_CONFIG. A missing or malformed file yields the defaults.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

CONFIG_DIR = Path.home() / ".config" / "advent-of-code"
CONFIG_FILE = CONFIG_DIR / "config.json"

INPUT_DIR_ENV = "AOC_INPUT_DIR"

DEFAULT_CONFIG: dict[str, Any] = {
    "input_dir": "in",
}


def get_config_file() -> Path:
    """Get the configuration file path."""
    return CONFIG_FILE


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base, in place. Returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config() -> dict[str, Any]:
    """Load configuration from file, or return defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_file = get_config_file()

    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                user_config = json.load(f)
        except (json.JSONDecodeError, OSError):
            return config
        if isinstance(user_config, dict):
            deep_merge(config, user_config)

    return config


def get_input_dir(override: Path | None = None) -> Path:
    """Resolve the input directory: explicit override, then env, then config."""
    if override is not None:
        return override

    from_env = os.environ.get(INPUT_DIR_ENV)
    if from_env:
        return Path(from_env)

    return Path(load_config()["input_dir"]).expanduser()
