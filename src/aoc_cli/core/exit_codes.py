"""
Exit codes for the advent-of-code CLI.

The process boundary knows exactly two outcomes:
  0: Success - command resolved and completed without error
  1: Failure - any error during parsing, resolution or execution

Note: Click/Typer argument parsing errors would normally exit with 2.
The dispatcher folds them into EXIT_FAILURE like every other error.
"""

EXIT_SUCCESS = 0  # Command completed successfully
EXIT_FAILURE = 1  # Any execution error


def normalize_exit_code(code: int | None) -> int:
    """Collapse an arbitrary exit status into the two-code contract.

    Args:
        code: Exit status reported by click, typer or a command.

    Returns:
        EXIT_SUCCESS for None or 0, EXIT_FAILURE for everything else.
    """
    if not code:
        return EXIT_SUCCESS
    return EXIT_FAILURE
