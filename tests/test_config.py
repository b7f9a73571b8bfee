"""Tests for config module."""

import json
from pathlib import Path

from aoc_cli import config
from aoc_cli.config import deep_merge


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_empty_override_returns_base(self):
        """Empty override should not modify base."""
        base = {"a": 1, "b": {"c": 2}}
        assert deep_merge(base.copy(), {}) == {"a": 1, "b": {"c": 2}}

    def test_nested_merge(self):
        """Nested dicts should be merged recursively."""
        base = {"a": {"b": 1, "c": 2}}
        assert deep_merge(base, {"a": {"c": 3}}) == {"a": {"b": 1, "c": 3}}

    def test_override_dict_with_non_dict(self):
        """Non-dict should override dict."""
        assert deep_merge({"a": {"b": 1}}, {"a": "string"}) == {"a": "string"}


class TestLoadConfig:
    """Tests for config loading."""

    def test_defaults_when_missing(self, temp_config_dir):
        """Should return defaults when the file doesn't exist."""
        assert config.load_config() == {"input_dir": "in"}

    def test_user_values_override_defaults(self, temp_config_dir):
        """Should let user values override defaults."""
        (temp_config_dir / "config.json").write_text(json.dumps({"input_dir": "/data/aoc"}))
        assert config.load_config()["input_dir"] == "/data/aoc"

    def test_malformed_json_returns_defaults(self, temp_config_dir):
        """Should return defaults for malformed JSON."""
        (temp_config_dir / "config.json").write_text("{not json")
        assert config.load_config() == {"input_dir": "in"}

    def test_non_object_json_returns_defaults(self, temp_config_dir):
        """Should return defaults when the JSON is not an object."""
        (temp_config_dir / "config.json").write_text("[1, 2]")
        assert config.load_config() == {"input_dir": "in"}

    def test_defaults_not_mutated(self, temp_config_dir):
        """Should never modify DEFAULT_CONFIG while merging."""
        (temp_config_dir / "config.json").write_text(json.dumps({"input_dir": "elsewhere"}))
        config.load_config()
        assert config.DEFAULT_CONFIG == {"input_dir": "in"}


class TestGetInputDir:
    """Tests for input directory precedence."""

    def test_override_wins(self, temp_config_dir, monkeypatch):
        """Should prefer an explicit directory over everything else."""
        monkeypatch.setenv(config.INPUT_DIR_ENV, "/from/env")
        assert config.get_input_dir(Path("/explicit")) == Path("/explicit")

    def test_env_beats_config(self, temp_config_dir, monkeypatch):
        """Should prefer AOC_INPUT_DIR over the config file."""
        (temp_config_dir / "config.json").write_text(json.dumps({"input_dir": "/from/config"}))
        monkeypatch.setenv(config.INPUT_DIR_ENV, "/from/env")
        assert config.get_input_dir() == Path("/from/env")

    def test_config_fallback(self, temp_config_dir):
        """Should use the configured input_dir without overrides."""
        (temp_config_dir / "config.json").write_text(json.dumps({"input_dir": "/from/config"}))
        assert config.get_input_dir() == Path("/from/config")

    def test_default_is_relative_in(self, temp_config_dir):
        """Should default to the relative "in" directory."""
        assert config.get_input_dir() == Path("in")
