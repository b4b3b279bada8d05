"""Classic array, recursion and backtracking exercises as plain functions."""

__version__ = "0.1.0"
__all__ = ["arrays", "recursion", "backtracking"]