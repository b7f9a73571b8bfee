"""Port definitions for the seams the CLI depends on."""
