"""Shared fixtures."""

import datetime
from unittest.mock import patch

import pytest

from aoc_cli import config
from aoc_cli.cli_common import state
from tests.fakes import build_fake_adapters

# Mid-event date: puzzles up to 2023 day 10 are released
TODAY = datetime.date(2023, 12, 10)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep user environment and global flags out of every test."""
    monkeypatch.delenv(config.INPUT_DIR_ENV, raising=False)
    monkeypatch.delenv("AOC_DEBUG", raising=False)
    state.debug = False
    yield
    state.debug = False


@pytest.fixture
def temp_config_dir(tmp_path, monkeypatch):
    """Point the config file at an isolated temporary directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.json")
    return config_dir


@pytest.fixture
def frozen_today():
    """Freeze the clock used by every command on TODAY."""
    adapters = build_fake_adapters(TODAY)
    with (
        patch("aoc_cli.commands.puzzle.get_default_adapters", return_value=adapters),
        patch("aoc_cli.commands.input.get_default_adapters", return_value=adapters),
    ):
        yield TODAY


@pytest.fixture
def input_tree(tmp_path):
    """Create an input directory with a few puzzle files."""
    root = tmp_path / "in"
    year = root / "2022"
    year.mkdir(parents=True)
    (year / "05.txt").write_text("day five\n")
    (year / "06.1.txt").write_text("day six phase one\n")
    (year / "07.2.txt").write_text("day seven phase two\n")
    return root
