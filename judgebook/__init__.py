"""Solutions to classic programming-contest problems as plain functions and classes."""

__version__ = "0.1.0"

__all__ = ["arrays", "grids", "lookups", "numbers", "sequences", "text"]