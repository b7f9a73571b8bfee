"""Allow running the CLI with ``python -m aoc_cli``."""

from .cli import main

if __name__ == "__main__":
    main()
