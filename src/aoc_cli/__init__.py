"""advent-of-code: a command-line helper for Advent of Code puzzles."""
