"""Tests for local input lookup."""

import pytest

from aoc_cli.core.errors import InputNotFoundError
from aoc_cli.core.inputs import candidate_paths, read_input, resolve_input
from aoc_cli.core.puzzle import Puzzle


class TestCandidatePaths:
    """Tests for the lookup order."""

    def test_phase_two_tries_previous_phase(self, tmp_path):
        """Should try the phase, previous phase and day files in order."""
        paths = candidate_paths(Puzzle(2022, 5, 2), tmp_path)
        assert [p.relative_to(tmp_path).as_posix() for p in paths] == [
            "2022/05.2.txt",
            "2022/05.1.txt",
            "2022/05.txt",
        ]

    def test_phase_one_skips_phase_zero(self, tmp_path):
        """Should not look for a phase zero file."""
        paths = candidate_paths(Puzzle(2022, 12, 1), tmp_path)
        assert [p.name for p in paths] == ["12.1.txt", "12.txt"]


class TestResolveInput:
    """Tests for picking the first existing file."""

    def test_day_file_shared_by_phases(self, input_tree):
        """Should fall back to the shared day file."""
        assert resolve_input(Puzzle(2022, 5, 2), input_tree).name == "05.txt"

    def test_phase_two_reuses_phase_one(self, input_tree):
        """Should reuse the phase one input for phase two."""
        assert resolve_input(Puzzle(2022, 6, 2), input_tree).name == "06.1.txt"

    def test_exact_phase_preferred(self, input_tree):
        """Should prefer the exact phase file over the day file."""
        (input_tree / "2022" / "07.txt").write_text("shared\n")
        assert resolve_input(Puzzle(2022, 7, 2), input_tree).name == "07.2.txt"

    def test_directories_are_not_inputs(self, input_tree):
        """Should ignore directories named like input files."""
        (input_tree / "2022" / "08.txt").mkdir()
        with pytest.raises(InputNotFoundError):
            resolve_input(Puzzle(2022, 8, 1), input_tree)

    def test_missing_input_lists_searched_paths(self, input_tree):
        """Should list the searched paths when nothing exists."""
        with pytest.raises(InputNotFoundError) as exc_info:
            resolve_input(Puzzle(2022, 7, 1), input_tree)
        error = exc_info.value
        assert error.user_message == "input not found"
        assert [p.rsplit("/", 1)[-1] for p in error.searched] == ["07.1.txt", "07.txt"]

    def test_read_input(self, input_tree):
        """Should return the resolved file's text."""
        assert read_input(Puzzle(2022, 6, 1), input_tree) == "day six phase one\n"
