"""Solutions to short, classic programming puzzles, with a small command line."""

__version__ = "0.1.0"

__all__ = ["cli", "grids", "numbers", "sequences", "text"]